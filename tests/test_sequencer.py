"""
End-to-end tests for the export → write → validate sequence.
"""

import json

from chainconf.errors import FilesystemError, ValidationError
from chainconf.files.default_writer import build_default_document
from chainconf.files.validator import validate_config_file
from chainconf.models.config import default_config
from chainconf.sequencer import SetupPhase, run_setup


def test_full_sequence_in_empty_directory(tmp_path, events):
    config_path = tmp_path / "config.json"
    schema_path = tmp_path / "config.schema.json"

    result = run_setup(config_path, schema_path, events)

    assert result.ok
    assert result.phase == SetupPhase.DONE
    assert result.exit_code == 0
    assert result.error is None
    assert sorted(p.name for p in tmp_path.iterdir()) == ["config.json", "config.schema.json"]
    assert config_path.stat().st_size > 0
    assert schema_path.stat().st_size > 0
    assert result.files_written == [str(schema_path), str(config_path)]

    assert validate_config_file(config_path) == default_config()
    assert result.config == default_config()


def test_full_sequence_reports_validated_config(tmp_path, events):
    result = run_setup(tmp_path / "config.json", tmp_path / "config.schema.json", events)

    assert events.info_messages[:3] == [
        f"Attempting to write schema to {tmp_path / 'config.schema.json'}",
        f"Successfully wrote schema to {tmp_path / 'config.schema.json'}",
        f"File size: {(tmp_path / 'config.schema.json').stat().st_size} bytes",
    ]
    assert events.info_messages[3] == f"Default config written to {tmp_path / 'config.json'}"
    message, payload = events.infos[-1]
    assert message == "Validated config"
    assert payload == result.config.to_document()
    assert events.errors == []


def test_schema_marker_points_at_schema_file(tmp_path, events):
    config_path = tmp_path / "app" / "config.json"
    schema_path = tmp_path / "schemas" / "config.schema.json"

    result = run_setup(config_path, schema_path, events)

    assert result.ok
    written = json.loads(config_path.read_text(encoding="utf-8"))
    assert written["$schema"] == "../schemas/config.schema.json"


def test_explicit_schema_ref_wins(tmp_path, events):
    config_path = tmp_path / "config.json"

    run_setup(config_path, tmp_path / "config.schema.json", events, schema_ref="./other.json")

    assert json.loads(config_path.read_text(encoding="utf-8"))["$schema"] == "./other.json"


def test_invalid_config_fails_validation_phase(tmp_path, events, monkeypatch):
    config_path = tmp_path / "config.json"
    schema_path = tmp_path / "config.schema.json"

    def write_bad_config(path, events, schema_ref):
        document = build_default_document(schema_ref)
        document["network"]["rpcUrl"] = "not-a-url"
        path.write_text(json.dumps(document), encoding="utf-8")
        return document

    monkeypatch.setattr("chainconf.sequencer.write_default_config", write_bad_config)

    result = run_setup(config_path, schema_path, events)

    assert not result.ok
    assert result.exit_code == 1
    assert result.phase == SetupPhase.FAILED
    assert result.failed_phase == SetupPhase.VALIDATE
    assert isinstance(result.error, ValidationError)
    assert result.error.fields == ["network.rpcUrl"]
    assert result.config is None

    message, cause = events.errors[-1]
    assert message == "An error occurred during configuration setup (validate)"
    assert cause is result.error

    # earlier outputs are left in place
    assert schema_path.exists()
    assert config_path.exists()


def test_export_failure_stops_before_writing_config(tmp_path, events):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    config_path = tmp_path / "config.json"

    result = run_setup(config_path, blocker / "config.schema.json", events)

    assert result.failed_phase == SetupPhase.EXPORT_SCHEMA
    assert isinstance(result.error, FilesystemError)
    assert result.files_written == []
    assert not config_path.exists()
    assert [message for message, _ in events.errors] == [
        "Failed to export schema",
        "An error occurred during configuration setup (export_schema)",
    ]


def test_write_failure_keeps_exported_schema(tmp_path, events):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    schema_path = tmp_path / "config.schema.json"

    result = run_setup(blocker / "config.json", schema_path, events)

    assert result.failed_phase == SetupPhase.WRITE_DEFAULT
    assert isinstance(result.error, FilesystemError)
    assert result.files_written == [str(schema_path)]
    assert schema_path.exists()
    assert events.errors[-1][0] == "An error occurred during configuration setup (write_default)"


def test_invalid_config_path_is_reported_as_failed_phase(tmp_path, events):
    result = run_setup(str(tmp_path / "bad\0config.json"), tmp_path / "config.schema.json", events)

    assert result.exit_code == 1
    assert result.failed_phase == SetupPhase.WRITE_DEFAULT
    assert isinstance(result.error, FilesystemError)
    assert events.errors[-1][0] == "An error occurred during configuration setup (write_default)"
