"""
Data classes flowing through the discovery pipeline.

TagEntry comes out of the manifest parser, ResolvedBuildTarget out of the
context resolver; Diagnostics and MatrixReport are what the aggregator hands
to the emitter.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class TagEntry(BaseModel):
    """
        Class represents one `TAG [RELATIVE_CONTEXT]` line of a manifest.
    """
    model_config = ConfigDict(frozen=True)

    tag: str = Field(min_length=1)
    relative_context: Optional[str] = None
    line: int = 0

    @property
    def needs_inference(self) -> bool:
        return not self.relative_context


class ResolvedBuildTarget(BaseModel):
    """
        Class represents one matrix entry. Field order is the emitted key order.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    tag: str
    context: str
    dockerfile: str


class ImageState(BaseModel):
    """
        Per-image state gathered in the single pass over an image directory.
    """
    name: str
    path: str
    has_dockerfile: bool = False
    has_manifest: bool = False
    entries: List[TagEntry] = Field(default_factory=list)


class Diagnostics(BaseModel):
    """
        The three diagnostic lists. Insertion-ordered, never de-duplicated.
    """
    missing_dockerfile: List[str] = Field(default_factory=list)
    missing_tags: List[str] = Field(default_factory=list)
    missing_context: List[str] = Field(default_factory=list)

    @property
    def blocks_strict(self) -> bool:
        """Only missing tags and missing contexts fail a strict run."""
        return bool(self.missing_tags or self.missing_context)


class MatrixReport(BaseModel):
    """
        Terminal structure of a discovery run.
    """
    include: List[ResolvedBuildTarget] = Field(default_factory=list)
    diagnostics: Diagnostics = Field(default_factory=Diagnostics)

    def outputs(self) -> Dict[str, Any]:
        """Return the CI outputs keyed by output name, in emission order."""
        return {
            "matrix": {"include": [target.model_dump() for target in self.include]},
            "missing_dockerfile": list(self.diagnostics.missing_dockerfile),
            "missing_tags": list(self.diagnostics.missing_tags),
            "missing_context": list(self.diagnostics.missing_context),
        }
