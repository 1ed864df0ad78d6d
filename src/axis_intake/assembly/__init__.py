"""Document assembly: two-pass page accounting, cover, ToC and merge."""

from __future__ import annotations

from axis_intake.assembly.pipeline import ApplicationAssembler, build_filename

__all__ = ["ApplicationAssembler", "build_filename"]
