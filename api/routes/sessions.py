"""Session endpoints: long-lived interpreters addressed by id."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
import io
import uuid

from tforth.runtime.executor import ExecutionConfig, ExecutionResult
from tforth.runtime.interpreter import Interpreter

router = APIRouter()

DEFAULT_MAX_STEPS = 100_000

# In-memory storage; sessions die with the process
sessions_db: Dict[str, Interpreter] = {}


class SessionConfig(BaseModel):
    """Evaluation options for a new session."""
    max_steps: int = Field(default=DEFAULT_MAX_STEPS, ge=1, le=10_000_000)
    nested_conditionals: bool = False


class SessionResponse(BaseModel):
    """Session identity and current state."""
    session_id: str
    stack: List[int]
    procedures: Dict[str, List[str]]
    words: int
    config: Dict[str, Any]


class EvalRequest(BaseModel):
    """Source text to evaluate."""
    source: str


class EvalResponse(BaseModel):
    """Outcome of one eval call."""
    success: bool
    error: Optional[str] = None
    error_kind: Optional[str] = None
    output: List[int] = []
    stack: List[int] = []
    tokens_consumed: int = 0
    execution_time_ms: float = 0.0


def new_interpreter(config: Optional[SessionConfig] = None) -> Interpreter:
    config = config or SessionConfig()
    return Interpreter(
        config=ExecutionConfig(
            max_steps=config.max_steps,
            nested_conditionals=config.nested_conditionals,
        ),
        output=io.StringIO(),
    )


def to_eval_response(result: ExecutionResult) -> EvalResponse:
    return EvalResponse(
        success=result.success,
        error=result.error_message,
        error_kind=result.error_kind,
        output=result.output,
        stack=result.stack,
        tokens_consumed=result.tokens_consumed,
        execution_time_ms=result.execution_time_ms,
    )


def get_session(session_id: str) -> Interpreter:
    if session_id not in sessions_db:
        raise HTTPException(status_code=404, detail="Session not found")
    return sessions_db[session_id]


def session_response(session_id: str, interpreter: Interpreter) -> SessionResponse:
    return SessionResponse(session_id=session_id, **interpreter.snapshot())


@router.post("/sessions", response_model=SessionResponse, status_code=201)
async def create_session(config: Optional[SessionConfig] = None):
    """Start a new session with the standard word set."""
    session_id = uuid.uuid4().hex
    interpreter = new_interpreter(config)
    sessions_db[session_id] = interpreter
    return session_response(session_id, interpreter)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def read_session(session_id: str):
    """Current stack and user definitions of a session."""
    return session_response(session_id, get_session(session_id))


@router.post("/sessions/{session_id}/eval", response_model=EvalResponse)
async def eval_in_session(session_id: str, request: EvalRequest):
    """Evaluate a line; definitions and stack carry over to the next call."""
    interpreter = get_session(session_id)
    return to_eval_response(interpreter.eval(request.source))


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str):
    """Discard a session."""
    get_session(session_id)
    del sessions_db[session_id]
    return {"deleted": True}


@router.post("/eval", response_model=EvalResponse)
async def eval_once(request: EvalRequest):
    """Evaluate in a throwaway session."""
    return to_eval_response(new_interpreter().eval(request.source))
