import platform
import sys

import pytest

from fuelup.target_triple import TargetTriple

TARGETS = [
    "x86_64-apple-darwin",
    "aarch64-apple-darwin",
    "x86_64-unknown-linux-gnu",
    "aarch64-unknown-linux-gnu",
]


@pytest.mark.parametrize("target", TARGETS)
def test_valid_targets_round_trip(target):
    assert str(TargetTriple(target)) == target


@pytest.mark.parametrize(
    "text, message",
    [
        ("x86_64", "missing vendor-os specifier"),
        ("arm64-apple-darwin", "Unsupported architecture: 'arm64'"),
        ("x86_64-apple", "missing os specifier"),
        ("x86_64-pc-linux-gnu", "Unsupported vendor: 'pc'"),
        ("x86_64-unknown-linux", "Unsupported os: 'linux'"),
    ],
)
def test_invalid_targets(text, message):
    with pytest.raises(ValueError) as info:
        TargetTriple(text)
    assert str(info.value) == message


def test_equality_and_hash():
    a = TargetTriple("x86_64-apple-darwin")
    b = TargetTriple("x86_64-apple-darwin")
    assert a == b
    assert len({a, b}) == 1


def test_ordering_follows_string():
    triples = sorted(TargetTriple(t) for t in TARGETS)
    assert [str(t) for t in triples] == sorted(TARGETS)


def test_from_host_macos_arm(monkeypatch):
    monkeypatch.setattr(platform, "machine", lambda: "arm64")
    monkeypatch.setattr(sys, "platform", "darwin")
    assert str(TargetTriple.from_host()) == "aarch64-apple-darwin"


def test_from_host_linux_x86(monkeypatch):
    monkeypatch.setattr(platform, "machine", lambda: "x86_64")
    monkeypatch.setattr(sys, "platform", "linux")
    assert str(TargetTriple.from_host()) == "x86_64-unknown-linux-gnu"


def test_from_host_unsupported_os(monkeypatch):
    monkeypatch.setattr(platform, "machine", lambda: "x86_64")
    monkeypatch.setattr(sys, "platform", "win32")
    with pytest.raises(ValueError, match="Unsupported os"):
        TargetTriple.from_host()


def test_from_host_unsupported_arch(monkeypatch):
    monkeypatch.setattr(platform, "machine", lambda: "riscv64")
    monkeypatch.setattr(sys, "platform", "linux")
    with pytest.raises(ValueError, match="Unsupported architecture"):
        TargetTriple.from_host()