from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    field: str
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "code": self.code}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Outcome of checking a credit application against leasing policy.

    ``errors`` block the calculation, ``warnings`` are advisories returned
    alongside a successful result. Both hold every issue found, in check order.
    """

    errors: tuple[ValidationIssue, ...] = ()
    warnings: tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_messages(self) -> list[str]:
        return [issue.message for issue in self.errors]

    @property
    def warning_messages(self) -> list[str]:
        return [issue.message for issue in self.warnings]

    def merge(self, other: ValidationResult) -> ValidationResult:
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )
