"""Tests for ResolutionContext."""

import dataclasses
import os

import pytest

import crosspath.resolution.context as context_mod
from crosspath import ResolutionContext
from crosspath.errors import ContextLookupError


class TestResolutionContext:
    def test_lookup(self, ctx):
        assert ctx.lookup_env("MYVAR") == "v"
        assert ctx.lookup_env("UNDEFINED") is None

    def test_is_frozen(self, ctx):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.home = "/elsewhere"  # type: ignore[misc]

    def test_environ_is_a_snapshot(self):
        """Mutating the source mapping after construction has no effect."""
        env = {"A": "1"}
        ctx = ResolutionContext(home="/h", cwd="/w", environ=env)
        env["A"] = "2"
        env["B"] = "3"
        assert ctx.lookup_env("A") == "1"
        assert ctx.lookup_env("B") is None
        with pytest.raises(TypeError):
            ctx.environ["C"] = "4"  # type: ignore[index]

    def test_repr_hides_environment(self, ctx):
        assert "MYVAR" not in repr(ctx)


class TestFromHost:
    def test_reads_process_state(self, monkeypatch):
        monkeypatch.setenv("XP_TEST_VARIABLE", "42")
        ctx = ResolutionContext.from_host()
        assert ctx.cwd == os.getcwd()
        assert ctx.home
        assert ctx.lookup_env("XP_TEST_VARIABLE") == "42"

    def test_home_failure_is_surfaced(self, monkeypatch):
        class NoHome:
            @classmethod
            def home(cls):
                raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(context_mod, "Path", NoHome)
        with pytest.raises(ContextLookupError, match="could not resolve the home directory"):
            ResolutionContext.from_host()

    def test_cwd_failure_is_surfaced(self, monkeypatch):
        def gone():
            raise FileNotFoundError("cwd removed")

        with monkeypatch.context() as m:
            m.setattr(os, "getcwd", gone)
            with pytest.raises(ContextLookupError) as excinfo:
                ResolutionContext.from_host()
        assert "current working directory" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)
