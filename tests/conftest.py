# pragma: no cover  # do not test coverage of tests...
"""Provide fixtures for pytest."""

import pytest
from scopebits import Registry, fingerprint
from scopebits.models import RawScope

AB_CHECKSUM = "2HGWGNKVpyBAqxPboi5rSY5rStbRtUrfUWrnQwTzF3gM"
ABC_CHECKSUM = "2icyXAVNHz29D1dTVYE59sm5foRZmqqBTY26bZdN3q58"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep SCOPEBITS_* env vars and any local config.yml out of the tests."""
    monkeypatch.delenv("SCOPEBITS_CONFIG_FILE", raising=False)
    monkeypatch.delenv("SCOPEBITS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SCOPEBITS_SCOPES", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def thousand_tags() -> list[str]:
    """Fixture of the tags "0" to "999", in numeric order."""
    return [str(idx) for idx in range(1000)]


@pytest.fixture
def fake_valid_ab_scope() -> RawScope:
    """Fixture to create a raw scope "test" with tags a and b."""
    return RawScope(name="test", checksum=AB_CHECKSUM, tags=["a", "b"])


@pytest.fixture
def fake_valid_xtest_scope() -> RawScope:
    """Fixture to create a raw scope "xtest" with tags c, a and b."""
    return RawScope(name="xtest", checksum=ABC_CHECKSUM, tags=["c", "a", "b"])


@pytest.fixture
def registry(thousand_tags, fake_valid_xtest_scope) -> Registry:
    """Fixture of a registry with a 1000-tag "test" scope and the "xtest" scope."""
    return Registry.build(
        [
            RawScope(
                name="test", checksum=fingerprint(thousand_tags), tags=thousand_tags
            ),
            fake_valid_xtest_scope,
        ]
    )
