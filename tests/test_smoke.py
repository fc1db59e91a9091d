"""Smoke tests for tforth modules."""
import pytest
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


class TestModuleImports:
    """Basic import tests for all modules."""

    def test_import_package(self):
        """Test top-level package exports."""
        import tforth
        assert tforth.Interpreter is not None
        assert tforth.__version__

    def test_import_runtime_state(self):
        """Test runtime.state module imports."""
        from tforth.runtime.state import RuntimeState, TokenQueue, DataStack
        assert RuntimeState is not None
        assert TokenQueue is not None
        assert DataStack is not None

    def test_import_runtime_environment(self):
        """Test runtime.environment module imports."""
        from tforth.runtime.environment import Dictionary, NativeProcedure, Procedure, Literal
        assert Dictionary is not None

    def test_import_runtime_evaluator(self):
        """Test runtime.evaluator module imports."""
        from tforth.runtime.evaluator import WordEvaluator
        assert WordEvaluator is not None

    def test_import_runtime_executor(self):
        """Test runtime.executor module imports."""
        from tforth.runtime.executor import Executor, ExecutionConfig
        assert Executor is not None

    def test_import_words_first(self):
        """Test the word set imports on its own."""
        from tforth.words import register_standard_words
        assert register_standard_words is not None

    def test_import_cli(self):
        """Test cli imports."""
        from tforth.cli import main
        assert main is not None

    def test_error_kinds(self):
        """Test every error carries a kind and message."""
        from tforth import errors
        for name in errors.__all__:
            cls = getattr(errors, name)
            assert issubclass(cls, errors.ForthError)
            assert cls.kind == name


class TestQuickEval:
    """One-line sanity checks."""

    def test_add(self, interpreter):
        """Test 2 3 + leaves 5."""
        assert interpreter.eval("2 3 +").success
        assert interpreter.stack == [5]
