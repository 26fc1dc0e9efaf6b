# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Project directory contexts and the tool helpers attached to them."""

from __future__ import annotations

from .base import Context, ContextPrimitives
from .bundle import BundleHelper
from .sorbet import SorbetHelper

__all__ = ["BundleHelper", "Context", "ContextPrimitives", "SorbetHelper"]
