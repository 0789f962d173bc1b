"""Base class for environment-backed configuration modules."""

import typing as t

from pydantic import BaseModel, ConfigDict

from ..resolution import (
    EnvironmentSource,
    EnvVar,
    FieldBinding,
    parser_for,
    resolve,
    source_or_process,
)


class BaseModule(BaseModel):
    """Frozen configuration record whose fields declare their own env binding.

    Subclasses annotate fields with ``Annotated[T, EnvVar("KEY")]`` and a
    default. Fields without an ``EnvVar`` keep their default on resolution.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def default(cls) -> t.Self:
        """Hard-coded defaults. Never reads the environment."""
        return cls()

    @classmethod
    def from_environment(cls, source: EnvironmentSource | None = None) -> t.Self:
        """Resolve every bound field from ``source`` (process env when None).

        Never fails: absent or unparsable values fall back to field defaults.
        """
        return cls(**cls.resolve_fields(source_or_process(source)))

    @classmethod
    def resolve_fields(cls, source: EnvironmentSource) -> dict[str, t.Any]:
        return {
            binding.name: resolve(
                source, binding.keys, binding.default, binding.parser
            )
            for binding in cls.env_bindings()
        }

    @classmethod
    def env_bindings(cls) -> tuple[FieldBinding, ...]:
        """Published key contract of this module, in field order."""
        bindings = []
        for name, field in cls.model_fields.items():
            env_var = next(
                (item for item in field.metadata if isinstance(item, EnvVar)), None
            )
            if env_var is None:
                continue
            bindings.append(
                FieldBinding(
                    name=name,
                    keys=env_var.keys,
                    annotation=field.annotation,
                    default=field.get_default(call_default_factory=True),
                    parser=env_var.parser or parser_for(field.annotation),
                )
            )
        return tuple(bindings)
