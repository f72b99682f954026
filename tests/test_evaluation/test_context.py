"""Tests for the isolated evaluation context."""

import pytest

from entry_evaluator.core.errors import EvaluationError
from entry_evaluator.evaluation.context import (
    EvaluationContext,
    GlobalScope,
    create_context,
    evaluate,
)


class TestCreateContext:
    """Test context construction."""

    def test_exposes_module_exports_alias(self):
        """module.exports and exports start as the same empty dict."""
        context = create_context({})

        assert context.namespace["exports"] == {}
        assert context.namespace["module"].exports is context.namespace["exports"]

    def test_self_references_point_at_context(self):
        """window and globalThis are views over the namespace itself."""
        context = create_context()

        window = context.namespace["window"]
        assert isinstance(window, GlobalScope)
        assert context.namespace["globalThis"] is window

        window.answer = 42
        assert context.namespace["answer"] == 42

    def test_base_scope_is_shallow_copied(self):
        """Bindings are copied, values are shared."""
        shared = []
        base_scope = {"calls": shared, "name": "base"}

        context = create_context(base_scope)
        evaluate(context, "calls.append(name)\nname = 'changed'", "entry.py")

        assert shared == ["base"]
        assert base_scope["name"] == "base"
        assert "exports" not in base_scope

    def test_reserved_bindings_override_base_scope(self):
        """exports/module/window are always the context's own."""
        context = create_context({"exports": "stale", "window": None})

        assert context.namespace["exports"] == {}
        assert isinstance(context.namespace["window"], GlobalScope)

    def test_fresh_context_each_time(self):
        """No state leaks from one context to the next."""
        first = create_context()
        evaluate(first, "window.marker = True", "first.py")

        second = create_context()
        assert "marker" not in second.namespace
        assert "marker" not in second.namespace["window"]


class TestEvaluate:
    """Test evaluating source in a context."""

    def test_state_persists_across_evaluations(self):
        """Later entries observe what earlier entries registered."""
        context = EvaluationContext()

        context.evaluate("window.registry = {'greeting': 'hello'}", "e1.py")
        context.evaluate(
            "module.exports = {'default': registry['greeting'] + ' world'}", "e2.py"
        )

        assert context.exported_value() == "hello world"
        assert context.evaluated == ["e1.py", "e2.py"]

    def test_accepts_bytes_source(self):
        """Source read from disk as bytes evaluates the same as text."""
        context = EvaluationContext()

        context.evaluate(b"exports['a'] = 1\n", "bytes.py")

        assert context.exported_value() == {"a": 1}

    def test_host_globals_not_visible(self):
        """Module globals of the host are not reachable by name."""
        context = EvaluationContext()

        with pytest.raises(EvaluationError) as exc_info:
            context.evaluate("module.exports = pytest", "leak.py")

        assert isinstance(exc_info.value.original_error, NameError)

    def test_runtime_error_wrapped(self):
        """Errors keep the label, the source and the raw exception."""
        context = EvaluationContext()
        source = "x = 1\nraise ValueError('boom')\n"

        with pytest.raises(EvaluationError) as exc_info:
            context.evaluate(source, "bad.py")

        error = exc_info.value
        assert error.label == "bad.py"
        assert error.source == source
        assert isinstance(error.original_error, ValueError)
        assert error.__cause__ is error.original_error
        assert context.evaluated == []

    def test_exit_call_wrapped(self):
        """Calling exit() inside an entry is an evaluation error, not an exit."""
        context = EvaluationContext()

        with pytest.raises(EvaluationError) as exc_info:
            context.evaluate("raise SystemExit(3)\n", "exits.py")

        original = exc_info.value.original_error
        assert isinstance(original, SystemExit)
        assert original.code == 3
        assert context.evaluated == []

    def test_keyboard_interrupt_not_wrapped(self):
        context = EvaluationContext()

        with pytest.raises(KeyboardInterrupt):
            context.evaluate("raise KeyboardInterrupt\n", "interrupt.py")

    def test_syntax_error_wrapped(self):
        """A syntax error is reported as an evaluation error of the entry."""
        context = EvaluationContext()

        with pytest.raises(EvaluationError) as exc_info:
            context.evaluate("def broken(:\n", "syntax.py")

        original = exc_info.value.original_error
        assert isinstance(original, SyntaxError)
        assert original.filename == "syntax.py"


class TestExportedValue:
    """Test default-export unwrapping."""

    def test_default_key_is_unwrapped(self):
        context = EvaluationContext()
        context.evaluate("module.exports = {'default': 'X', 'other': 'Y'}", "a.py")

        assert context.exported_value() == "X"

    def test_mapping_without_default_returned_whole(self):
        context = EvaluationContext()
        context.evaluate("module.exports = {'a': 1}", "a.py")

        assert context.exported_value() == {"a": 1}

    def test_falsy_default_still_unwrapped(self):
        """Key presence decides, not truthiness."""
        context = EvaluationContext()
        context.evaluate("exports['default'] = ''", "a.py")

        assert context.exported_value() == ""

    def test_unwrapping_applies_once(self):
        """A nested default is left alone."""
        context = EvaluationContext()
        context.evaluate(
            "module.exports = {'default': {'default': 'inner'}}", "a.py"
        )

        assert context.exported_value() == {"default": "inner"}

    def test_non_mapping_exports(self):
        context = EvaluationContext()
        context.evaluate("module.exports = '<p>plain</p>'", "a.py")

        assert context.exported_value() == "<p>plain</p>"


class TestGlobalScope:
    """Test the attribute view used for window/globalThis."""

    def test_missing_attribute_raises_attribute_error(self):
        scope = GlobalScope({})

        with pytest.raises(AttributeError):
            _ = scope.missing

    def test_delete_binding(self):
        namespace = {"a": 1}
        scope = GlobalScope(namespace)

        del scope.a

        assert "a" not in namespace
        with pytest.raises(AttributeError):
            del scope.a

    def test_item_access(self):
        namespace: dict[str, object] = {}
        scope = GlobalScope(namespace)

        scope["b"] = 2

        assert scope["b"] == 2
        assert list(scope) == ["b"]
