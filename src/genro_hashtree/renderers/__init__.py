# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Renderers for HashTree - base class and output formats."""

from .base import RendererBase
from .html import HtmlListRenderer
from .outline import OutlineRenderer

__all__ = [
    'RendererBase',
    'HtmlListRenderer',
    'OutlineRenderer',
]
