"""Isolated evaluation context shared by every entry of one build pass.

Bundle code runs with the context namespace as its only globals. The
namespace follows the conventions bundles are written against:

* ``exports``: an empty dict the bundle may fill in
* ``module``: an object whose ``exports`` attribute aliases that same dict,
  and which the bundle may reassign (``module.exports = {...}``)
* ``window`` / ``globalThis``: the context itself; attribute writes such as
  ``window.registry = {}`` create namespace bindings visible to later code

State accumulates across ``evaluate`` calls, so later entries observe what
earlier ones registered. Nothing outside the namespace is shared: each build
pass creates a new context.
"""

from collections.abc import Iterator, Mapping
from types import SimpleNamespace
from typing import Any

from entry_evaluator.core.errors import EvaluationError
from entry_evaluator.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

SELF_REFERENCE_NAMES = ("window", "globalThis")


class GlobalScope:
    """Attribute and item view over an evaluation namespace."""

    __slots__ = ("_namespace",)

    def __init__(self, namespace: dict[str, Any]) -> None:
        object.__setattr__(self, "_namespace", namespace)

    def __getattr__(self, name: str) -> Any:
        try:
            return self._namespace[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        self._namespace[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._namespace[name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, name: str) -> Any:
        return self._namespace[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._namespace[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self._namespace

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._namespace))

    def __repr__(self) -> str:
        names = sorted(k for k in self._namespace if not k.startswith("__"))
        return f"GlobalScope({', '.join(names)})"


class EvaluationContext:
    """Mutable namespace for one build pass."""

    def __init__(self, base_scope: Mapping[str, Any] | None = None) -> None:
        namespace: dict[str, Any] = dict(base_scope or {})
        exports: dict[str, Any] = {}
        namespace["exports"] = exports
        namespace["module"] = SimpleNamespace(exports=exports)
        scope = GlobalScope(namespace)
        for name in SELF_REFERENCE_NAMES:
            namespace[name] = scope

        self.namespace = namespace
        self.scope = scope
        self.evaluated: list[str] = []

    @property
    def module(self) -> Any:
        return self.namespace.get("module")

    def evaluate(self, source: str | bytes, label: str) -> None:
        """Run ``source`` against the namespace.

        ``label`` becomes the code's filename, so tracebacks and syntax errors
        point at the entry that failed.

        Raises:
            EvaluationError: If compiling or running the source raises, including
                a call to ``exit()``; KeyboardInterrupt is not wrapped
        """
        try:
            code = compile(source, label, "exec", dont_inherit=True)
            exec(code, self.namespace)  # noqa: S102
        except (Exception, SystemExit) as e:
            logger.debug(
                "entry_evaluation_raised",
                label=label,
                error_type=type(e).__name__,
            )
            raise EvaluationError(label, _source_text(source), e) from e
        self.evaluated.append(label)

    def exported_value(self) -> Any:
        """Return the effective exported value.

        A ``default`` key in the exports mapping wins over the mapping itself.
        """
        exported = getattr(self.module, "exports", None)
        if isinstance(exported, Mapping) and "default" in exported:
            return exported["default"]
        return exported

    def __repr__(self) -> str:
        return f"EvaluationContext(evaluated={self.evaluated!r})"


def _source_text(source: str | bytes) -> str:
    if isinstance(source, bytes):
        return source.decode("utf-8", errors="replace")
    return source


def create_context(base_scope: Mapping[str, Any] | None = None) -> EvaluationContext:
    """Create a fresh evaluation context seeded from ``base_scope``."""
    return EvaluationContext(base_scope)


def evaluate(context: EvaluationContext, source: str | bytes, label: str) -> None:
    """Evaluate ``source`` in ``context`` under ``label``."""
    context.evaluate(source, label)


__all__ = [
    "EvaluationContext",
    "GlobalScope",
    "SELF_REFERENCE_NAMES",
    "create_context",
    "evaluate",
]
