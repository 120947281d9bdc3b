"""
Tests for the organization-bound builder.
"""

import pytest

from snapkit import ConfigurationError, SnapkitImageURL, TransformOptions, build_snapkit_image_url

SOURCE = "https://cdn.cloudfront.net/image.jpg"


@pytest.fixture
def builder():
    return SnapkitImageURL("my-org")


def test_builder_properties(builder):
    assert builder.organization_name == "my-org"
    assert builder.base_url == "https://my-org.snapkit.dev/image"
    assert repr(builder) == "SnapkitImageURL('my-org')"


def test_builder_matches_function(builder):
    transform = TransformOptions(w=300, h=200, fit="cover", format="webp")
    assert builder.build(SOURCE) == build_snapkit_image_url("my-org", SOURCE)
    assert builder.build(SOURCE, transform) == build_snapkit_image_url("my-org", SOURCE, transform)


def test_builder_from_env(monkeypatch):
    monkeypatch.setenv("SNAPKIT_ORG", "env-org")
    builder = SnapkitImageURL.from_env()
    assert builder.organization_name == "env-org"


def test_builder_from_env_file(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("SNAPKIT_ORG=file-org\n")
    assert SnapkitImageURL.from_env(env_file).organization_name == "file-org"


def test_builder_from_env_missing():
    with pytest.raises(ConfigurationError, match="SNAPKIT_ORG environment variable is not set"):
        SnapkitImageURL.from_env()


if __name__ == "__main__":
    pytest.main()
