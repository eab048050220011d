"""Tests using Version as a Pydantic field type."""

import pytest
from pydantic import BaseModel, ValidationError

from buildver import Version


class Artifact(BaseModel):
    """A model with version fields."""

    name: str
    version: Version
    previous: Version | None = None


def test_validate_from_string() -> None:
    """Test strings are parsed into versions."""
    artifact = Artifact.model_validate(
        {"name": "core", "version": "1.8.0-beta.2+sha.abc"}
    )
    assert artifact.version == Version.parse("1.8.0-beta.2")
    assert artifact.version.metadata == "sha.abc"


def test_validate_from_instance(release: Version) -> None:
    """Test Version instances pass through unchanged."""
    artifact = Artifact(name="core", version=release)
    assert artifact.version is release


def test_validate_optional_field() -> None:
    """Test versions work inside optional fields."""
    artifact = Artifact.model_validate(
        {"name": "core", "version": "2.0", "previous": "1.9.3"}
    )
    assert artifact.previous == Version(1, 9, 3)
    assert artifact.previous < artifact.version


def test_validate_from_json() -> None:
    """Test versions are parsed from JSON strings."""
    artifact = Artifact.model_validate_json('{"name": "core", "version": "3-RC1"}')
    assert artifact.version == Version.parse("3.0.0-RC1")


@pytest.mark.parametrize("value", ["1.0.0.0", "foo", "1.0.0-", "", 1, None])
def test_invalid_values_rejected(value: object) -> None:
    """Test invalid versions raise ValidationError."""
    with pytest.raises(ValidationError):
        Artifact.model_validate({"name": "core", "version": value})


def test_invalid_string_reports_reason() -> None:
    """Test the parse failure reason is in the validation error."""
    with pytest.raises(ValidationError, match="at most 3 dotted parts"):
        Artifact.model_validate({"name": "core", "version": "1.0.0.0"})


def test_invalid_json_rejected() -> None:
    """Test invalid versions in JSON raise ValidationError."""
    with pytest.raises(ValidationError):
        Artifact.model_validate_json('{"name": "core", "version": "0.foo.0"}')


def test_serialize() -> None:
    """Test versions serialize to their canonical string."""
    artifact = Artifact(name="core", version=Version.parse("1.2-beta+b7"))
    assert artifact.model_dump() == {
        "name": "core",
        "version": "1.2.0-beta+b7",
        "previous": None,
    }
    assert artifact.model_dump_json() == (
        '{"name":"core","version":"1.2.0-beta+b7","previous":null}'
    )


def test_json_round_trip() -> None:
    """Test dumping and loading JSON gives an equal model."""
    artifact = Artifact(
        name="core",
        version=Version.parse("2.0.0-{integration}"),
        previous=Version.parse("1.9.0+sha.1"),
    )
    loaded = Artifact.model_validate_json(artifact.model_dump_json())
    assert loaded == artifact
    assert loaded.previous is not None
    assert loaded.previous.metadata == "sha.1"


def test_json_schema() -> None:
    """Test versions appear as strings in the JSON schema."""
    schema = Artifact.model_json_schema()
    assert schema["properties"]["version"]["type"] == "string"
