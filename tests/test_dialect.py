"""Tests for generator version parsing and dialect selection."""

import subprocess

import pytest

from javadoc_provider.extractors import dialect
from javadoc_provider.extractors.dialect import (
    LEGACY,
    MODERN,
    detect_generator_version,
    parse_generator_version,
    resolve_dialect,
)


@pytest.mark.parametrize("version, expected", [
    ("1.6", 1.6),
    ("1.6.0_45", 1.6),
    ("1.8.0_292", 1.8),
    ("17.0.2", 17.0),
    ("11", 11.0),
    ("ea", None),
    ("", None),
    (None, None),
])
def test_parse_generator_version(version, expected):
    assert parse_generator_version(version) == expected


@pytest.mark.parametrize("version", ["1.6", "1.6.0_45", " 1.6 "])
def test_legacy_version_selects_legacy_dialect(version):
    assert resolve_dialect(version) is LEGACY


@pytest.mark.parametrize("version", ["1.5", "1.7", "1.8", "11", "17.0.2", "garbage", None])
def test_other_versions_select_modern_dialect(version):
    assert resolve_dialect(version) is MODERN


def test_dialect_markers():
    assert LEGACY.class_info_tag == "<P>"
    assert LEGACY.operation_info_tag == "<DD>"
    assert LEGACY.operation_link == '<A NAME="'
    assert LEGACY.response_marker == "<DD>"
    assert LEGACY.code_tag == "</CODE>"

    assert MODERN.class_info_tag == '<div class="block">'
    assert MODERN.operation_info_tag == '<div class="block">'
    assert MODERN.operation_link == '<a name="'
    assert MODERN.response_marker == "<dd>"
    assert MODERN.code_tag == "</code>"


def test_dialects_are_immutable():
    with pytest.raises(AttributeError):
        MODERN.code_tag = "</tt>"


def test_detect_version_from_environment(monkeypatch):
    monkeypatch.setenv("JAVA_VERSION", "1.8.0_292")
    assert detect_generator_version() == "1.8.0_292"


def test_detect_version_from_java_binary(monkeypatch):
    monkeypatch.delenv("JAVA_VERSION", raising=False)

    def fake_run(*args, **kwargs):
        return subprocess.CompletedProcess(
            args[0], 0, stdout="",
            stderr='openjdk version "17.0.2" 2022-01-18\nOpenJDK Runtime Environment\n',
        )

    monkeypatch.setattr(dialect.subprocess, "run", fake_run)
    assert detect_generator_version() == "17.0.2"


def test_detect_version_falls_back_without_java(monkeypatch):
    monkeypatch.delenv("JAVA_VERSION", raising=False)

    def missing_java(*args, **kwargs):
        raise FileNotFoundError("java")

    monkeypatch.setattr(dialect.subprocess, "run", missing_java)
    assert detect_generator_version() == "1.6"


def test_detect_version_falls_back_on_unreadable_output(monkeypatch):
    monkeypatch.setenv("JAVA_VERSION", "unknown")
    monkeypatch.setattr(
        dialect.subprocess, "run",
        lambda *args, **kwargs: subprocess.CompletedProcess(args[0], 1, stdout="", stderr="boom"),
    )
    assert detect_generator_version() == "1.6"
