import os
from dataclasses import dataclass

ENV_PREFIX = "WORDFINDER_"


@dataclass
class Settings:
    TOP_N: int = 10

    MAX_WORKERS: int = 4
    PARALLEL_MIN_WORDS: int = 32

    DEBUG: bool = False

    def __post_init__(self):
        # Override from WORDFINDER_* environment variables, validated like runtime edits
        overrides = {}
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(ENV_PREFIX + fld)
            if env_val is not None:
                overrides[fld] = env_val
        errors = update_settings(self, **overrides)
        if errors:
            detail = ", ".join(f"{ENV_PREFIX}{name}: {reason}" for name, reason in sorted(errors.items()))
            raise ValueError(f"Invalid environment settings ({detail})")


# Fields that may be changed at runtime, with their type and lower bound (if any)
EDITABLE_FIELDS: dict[str, tuple[type, int | None]] = {
    "TOP_N": (int, 0),
    "MAX_WORKERS": (int, 1),
    "PARALLEL_MIN_WORDS": (int, 0),
    "DEBUG": (bool, None),
}


def _coerce(kind: type, value):
    if kind is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        raise ValueError(f"expected bool, got {value!r}")
    if isinstance(value, bool):
        raise ValueError(f"expected {kind.__name__}, got {value!r}")
    return kind(value)


def update_settings(cfg: Settings, **changes) -> dict[str, str]:
    """Apply runtime edits to ``cfg``.

    Valid fields are applied even when others fail; the returned dict maps
    each rejected field to the reason.
    """
    errors: dict[str, str] = {}
    for name, value in changes.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "unknown setting"
            continue
        kind, minimum = EDITABLE_FIELDS[name]
        try:
            coerced = _coerce(kind, value)
        except (TypeError, ValueError) as e:
            errors[name] = str(e)
            continue
        if minimum is not None and coerced < minimum:
            errors[name] = f"must be >= {minimum}"
            continue
        setattr(cfg, name, coerced)
    return errors


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


settings = Settings()
