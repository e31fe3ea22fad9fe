# tests/conftest.py
# Deterministic resolution contexts so no test depends on the host's home, cwd or environment.

from __future__ import annotations

import pytest

from crosspath import ResolutionContext


@pytest.fixture
def ctx() -> ResolutionContext:
    """Unix-style context with a couple of defined variables."""
    return ResolutionContext(
        home="/home/tom",
        cwd="/work/project",
        environ={"MYVAR": "v", "DATA": "/srv/data", "NESTED": "${MYVAR}"},
    )


@pytest.fixture
def win_ctx() -> ResolutionContext:
    """Windows-style context whose cwd carries a drive letter."""
    return ResolutionContext(
        home="d:\\Users\\tom",
        cwd="d:\\work",
        environ={"MYVAR": "v", "TEMP": "C:\\Temp"},
    )


@pytest.fixture
def host_ctx(monkeypatch, ctx):
    """Make ResolutionContext.from_host() return the deterministic context."""
    monkeypatch.setattr(ResolutionContext, "from_host", classmethod(lambda cls: ctx))
    return ctx
