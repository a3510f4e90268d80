from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Sequence

import pytest

from wgdeck.wireguard import CommandResult, ProfileStore


class FakeRunner:
    """Returns canned results keyed by the joined command line."""

    def __init__(self, results: Dict[str, CommandResult] | None = None) -> None:
        self.results = results or {}
        self.calls: List[List[str]] = []

    def __call__(self, args: Sequence[str]) -> CommandResult:
        self.calls.append(list(args))
        return self.results.get(" ".join(args), CommandResult(0))


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    return FakeRunner


@pytest.fixture
def store(tmp_path: Path) -> ProfileStore:
    (tmp_path / "wg0.conf").write_text("[Interface]\nAddress = 10.0.0.2/32\n")
    (tmp_path / "empty.conf").write_text("  \n")
    (tmp_path / "notes.txt").write_text("ignored")
    return ProfileStore(tmp_path)
