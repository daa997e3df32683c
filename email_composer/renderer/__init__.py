"""Renderer HTML email."""
from .html import RenderResult, RenderWarning, render_block, render_email, render_email_with_warnings

__all__ = ["RenderResult", "RenderWarning", "render_block", "render_email", "render_email_with_warnings"]
