"""Validated construction options for timer-driven executors and loaders."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, PositiveFloat, PositiveInt
from pydantic import ValidationError as PydanticValidationError

from .primitives.exceptions import ExecutorConfigurationError

TOptions = TypeVar("TOptions", bound="ExecutorOptions")


class ExecutorOptions(BaseModel):
    """Immutable base for option models.

    Use :meth:`build` rather than the constructor so pydantic errors
    surface as :class:`ExecutorConfigurationError`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def build(cls: type[TOptions], **values: Any) -> TOptions:
        try:
            return cls(**values)
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
                msg = error.get("msg", "validation error")
                errors.setdefault(loc, []).append(msg)
            raise ExecutorConfigurationError(errors) from exc


class DebounceOptions(ExecutorOptions):
    """Quiet period, in seconds, before a debounced command fires."""

    delay: PositiveFloat


class RepeatOptions(ExecutorOptions):
    """Period, in seconds, between repeated invocations."""

    interval: PositiveFloat


class LoaderOptions(ExecutorOptions):
    """Page size requested from a pointer command."""

    per_step: PositiveInt = 20
