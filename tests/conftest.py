"""Test fixtures for the tforth test suite."""
import io
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tforth.runtime.executor import ExecutionConfig
from tforth.runtime.interpreter import Interpreter


@pytest.fixture
def interpreter() -> Interpreter:
    """Fresh session whose printed values go to a StringIO."""
    return Interpreter(output=io.StringIO())


@pytest.fixture
def nested_interpreter() -> Interpreter:
    """Session with depth-counted conditionals."""
    return Interpreter(
        config=ExecutionConfig(nested_conditionals=True),
        output=io.StringIO(),
    )


@pytest.fixture
def bounded_interpreter() -> Interpreter:
    """Session with a small step budget for runaway recursion."""
    return Interpreter(
        config=ExecutionConfig(max_steps=100),
        output=io.StringIO(),
    )


@pytest.fixture
def printed():
    """Return everything a session has written to its output sink."""
    def _printed(session: Interpreter) -> str:
        return session.state.output.getvalue()
    return _printed


@pytest.fixture
def source_file(tmp_path) -> Path:
    """Source file with a definition, a conditional and output."""
    path = tmp_path / "program.fs"
    path.write_text(
        ": sq dup * ;\n"
        ": sign dup 0 < if drop -1 else 0 > then ;\n"
        "4 sq .\n"
        "-7 sign .\n"
    )
    return path
