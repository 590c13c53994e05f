"""
Shared fixtures for xdt_core tests.
"""

import json

import pytest

from engines import RecordingLogger

SOURCE_CONFIG = """<?xml version="1.0"?>
<configuration>
  <appSettings/>
</configuration>
"""

SET_ATTRIBUTE_TRANSFORM = """<?xml version="1.0"?>
<configuration xmlns:xdt="http://schemas.microsoft.com/XML-Document-Transform">
  <appSettings xdt:Transform="SetAttributes" mode="release"/>
</configuration>
"""

WARNING_ONLY_TRANSFORM = """<?xml version="1.0"?>
<configuration xmlns:xdt="http://schemas.microsoft.com/XML-Document-Transform">
  <connectionStrings xdt:Transform="SetAttributes" mode="release"/>
</configuration>
"""

WARNING_AND_ERROR_TRANSFORM = """<?xml version="1.0"?>
<configuration xmlns:xdt="http://schemas.microsoft.com/XML-Document-Transform">
  <connectionStrings xdt:Transform="SetAttributes" mode="release"/>
  <appSettings xdt:Transform="Frobnicate"/>
</configuration>
"""


@pytest.fixture
def write_file(tmp_path):
    """Write text into tmp_path and return the file path."""
    def _write(name, contents):
        path = tmp_path / name
        path.write_text(contents, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def source_file(write_file):
    return write_file("source.config", SOURCE_CONFIG)


@pytest.fixture
def script_file(write_file):
    """Write a ScriptedEngine script and return its path."""
    def _script(events=(), result=True, name="script.json"):
        return write_file(name, json.dumps({"result": result, "events": list(events)}))
    return _script


@pytest.fixture
def recording_logger():
    return RecordingLogger()
