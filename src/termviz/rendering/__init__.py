"""Rendering back ends for indexed canvases."""
