import pytest

from licensure.config import Config
from licensure.template import Authors, Context, CopyrightHolder


@pytest.fixture
def test_context():
    """Factory for a single-year context with unwrapping enabled."""

    def _make(year: str, start_year=None) -> Context:
        return Context(
            ident="test",
            authors=Authors(),
            end_year=year,
            start_year=start_year,
            unwrap_text=True,
        )

    return _make


@pytest.fixture
def author_context():
    """Factory for a context with a single copyright holder."""

    def _make(year: str = "2020", start_year=None, unwrap_text: bool = True) -> Context:
        return Context(
            ident="test",
            authors=Authors.from_list(
                [CopyrightHolder(name="Mathew Robinson", email="chasinglogic@gmail.com")]
            ),
            end_year=year,
            start_year=start_year,
            unwrap_text=unwrap_text,
        )

    return _make


@pytest.fixture
def make_config():
    """Build a Config from YAML text."""

    def _make(text: str) -> Config:
        return Config.from_yaml(text)

    return _make
