from __future__ import annotations

from wlink.core import DataModel
from wlink.core.exceptions import ValidationError
from wlink.interface import InterfaceIdentifier

from ._link import LinkConstructor


class UnlinkedInterface(DataModel):
    """Import no component exports.

    Args:
        component:
            Importing component.
        interface:
            Required interface.
        potential_matches:
            Components exporting other interfaces of the same package.
    """

    component: str
    interface: InterfaceIdentifier
    potential_matches: list[str] = []


class ValidationReport(DataModel):
    discovered_links: list[LinkConstructor] = []
    unlinked_interfaces: list[UnlinkedInterface] = []
    warnings: list[str] = []
    errors: list[ValidationError] = []
    is_valid: bool = True

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def add_error(self, error: ValidationError) -> None:
        self.is_valid = False
        self.errors.append(error)

    def errors_of(self, kind: type[ValidationError]) -> list[ValidationError]:
        return [error for error in self.errors if isinstance(error, kind)]

    def summary(self) -> str:
        summary = []
        if self.discovered_links:
            summary.append(
                f"Discovered {len(self.discovered_links)} implicit links"
            )
        if self.unlinked_interfaces:
            summary.append(
                f"Found {len(self.unlinked_interfaces)} unlinked interfaces"
            )
        if self.warnings:
            summary.append(f"{len(self.warnings)} warnings")
        if self.errors:
            summary.append(f"{len(self.errors)} errors")
        if not summary:
            return "All validations passed successfully"
        return ", ".join(summary)
