import pytest

from steam_gephi_export.errors import (
    AppError,
    DatabaseError,
    DocumentError,
    EnvVarNotFoundError,
    ExportError,
    print_error,
)


def test_env_var_message():
    error = EnvVarNotFoundError("MONGODB_URI")
    assert str(error) == "Environment variable not found: MONGODB_URI"
    assert error.detail == "MONGODB_URI"


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (DatabaseError, "MongoDB error"),
        (DocumentError, "MongoDB BSON serialization/deserialization error"),
        (ExportError, "I/O error"),
    ],
)
def test_prefixes(cls, prefix):
    error = cls("boom")
    assert str(error) == f"{prefix}: boom"
    assert isinstance(error, AppError)


@pytest.mark.parametrize(
    "cls, expected",
    [
        (EnvVarNotFoundError, "Environment variable not found: detail"),
        (DatabaseError, "MongoDB error: detail"),
        (
            DocumentError,
            "MongoDB BSON serialization/deserialization error: detail",
        ),
        (ExportError, "I/O error: detail"),
    ],
)
def test_subclasses_are_caught_as_app_errors(cls, expected):
    with pytest.raises(AppError) as excinfo:
        raise cls("detail")
    assert type(excinfo.value) is cls
    assert str(excinfo.value) == expected


def test_document_error_message():
    error = DocumentError("bad document")
    assert isinstance(error, AppError)
    assert str(error) == (
        "MongoDB BSON serialization/deserialization error: bad document"
    )


def test_print_error_writes_to_stderr(capsys):
    print_error(DatabaseError("unreachable"))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "❌ Error:" in captured.err
    assert "MongoDB error: unreachable" in captured.err