"""Format dispatch with explicit request/response correlation.

Every export is described by an :class:`ExportRequest` that carries its
own structure snapshot, and answered by an :class:`ExportResult` that
echoes the request token.  Nothing is parked in shared state between
the two.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from enum import StrEnum

from kekule.export.obj import export_obj
from kekule.export.x3d import export_x3d
from kekule.export.xyz import DEFAULT_COMMENT, write_xyz
from kekule.model import ExportStyle, Molecule
from kekule.parser import parse_molfile

logger = logging.getLogger(__name__)


class ExportFormat(StrEnum):
    """Supported export formats.

    Attributes:
        XYZ: Coordinate list, read from the source molfile text.
        OBJ: Wavefront OBJ triangle mesh.
        X3D: X3D scene graph.
    """

    XYZ = "xyz"
    OBJ = "obj"
    X3D = "x3d"

    @property
    def filename(self) -> str:
        """Suggested download filename."""
        return f"molecule.{self.value}"

    @property
    def mime_type(self) -> str:
        """MIME type of the exported text."""
        return _MIME_TYPES[self]


_MIME_TYPES = {
    ExportFormat.XYZ: "chemical/x-xyz",
    ExportFormat.OBJ: "model/obj",
    ExportFormat.X3D: "model/x3d+xml",
}


@dataclass(frozen=True)
class ExportRequest:
    """One export job.

    Attributes:
        format: Target format.
        molecule: Structure snapshot for the mesh and scene-graph
            formats.  When ``None``, it is parsed from *source_text*.
        source_text: Molfile text.  Required for :attr:`ExportFormat.XYZ`,
            which reads the atom block directly.
        show_hydrogens: Hydrogen-visibility policy.
        style: Visual conventions; ``None`` for the defaults.
        comment: Comment line for the XYZ format.
        token: Correlation token, echoed in the result.  A fresh UUID
            is generated when not supplied.
    """

    format: ExportFormat
    molecule: Molecule | None = None
    source_text: str | None = None
    show_hydrogens: bool = True
    style: ExportStyle | None = None
    comment: str = DEFAULT_COMMENT
    token: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        object.__setattr__(self, "format", ExportFormat(self.format))
        if self.molecule is None and self.source_text is None:
            raise ValueError("an export needs a molecule or source_text")
        if self.format is ExportFormat.XYZ and self.source_text is None:
            raise ValueError("XYZ export reads source_text, which is missing")


@dataclass(frozen=True)
class ExportResult:
    """The answer to one :class:`ExportRequest`.

    Attributes:
        token: Token of the request this result answers.
        format: Format of :attr:`text`.
        text: Exported file content.
        filename: Suggested filename.
        mime_type: MIME type of :attr:`text`.
    """

    token: str
    format: ExportFormat
    text: str
    filename: str
    mime_type: str


def run_export(request: ExportRequest) -> ExportResult:
    """Produce the export described by *request*.

    Never raises for malformed structures: degenerate input yields a
    degenerate but well-formed file.
    """
    fmt = request.format
    if fmt is ExportFormat.XYZ:
        text = write_xyz(request.source_text, comment=request.comment)
    else:
        molecule = request.molecule
        if molecule is None:
            molecule = parse_molfile(request.source_text)
        if fmt is ExportFormat.OBJ:
            text = export_obj(molecule, request.show_hydrogens, request.style)
        else:
            text = export_x3d(molecule, request.show_hydrogens, request.style)

    logger.debug(
        "export %s finished: %s, %d characters", request.token, fmt, len(text),
    )
    return ExportResult(
        token=request.token,
        format=fmt,
        text=text,
        filename=fmt.filename,
        mime_type=fmt.mime_type,
    )
