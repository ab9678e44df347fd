"""Extraction and normalization of SVG markup embedded in TSX sources."""

from tsx_to_svg.pipeline.extractor import extract_svg
from tsx_to_svg.pipeline.transformer import transform_svg

__all__ = ["extract_svg", "transform_svg"]
