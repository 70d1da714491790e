"""Brightness compositing and image export."""

from .compositor import RenderParams, composite, composite_channel, overlay_alpha, render_params
from .exporter import ImageExporter, export_filename, render_surface

__all__ = [
    "ImageExporter",
    "RenderParams",
    "composite",
    "composite_channel",
    "export_filename",
    "overlay_alpha",
    "render_params",
    "render_surface",
]
