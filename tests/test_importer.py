import logging

import pytest

from cutscene_importer.instruction_definitions import import_definition
from cutscene_importer.instruction_definitions.errors import (
    DocumentReadError,
    ElementNotAllowedError,
    RuleNestingTooDeepError,
)


def test_import_full_definition(write_definition, write_png, tmp_path, importer_config):
    write_png(tmp_path / "icon.png")
    path = write_definition(
        """
        <opcode>SET_FLAG</opcode>
        <displayName>Set Flag</displayName>
        <category>State</category>
        <icon>icon.png</icon>
        <lineParameter id="flag"><displayName>Flag</displayName></lineParameter>
        <boolParameter id="value"><defaultValue>true</defaultValue></boolParameter>
        <implementation>
            flags[flag] = value
            return
        </implementation>
        <optionRule id="log">
            <displayName>Log change</displayName>
            <preInstruction id="pre"><opcode>LOG</opcode></preInstruction>
        </optionRule>
        """
    )
    definition = import_definition(path, {"ignored": True}, config=importer_config)

    assert definition.opcode == "SET_FLAG"
    assert [p.id for p in definition.parameters] == ["flag", "value"]
    assert definition.implementation.startswith("flags[flag] = value\nreturn\n")
    assert definition.icon is not None
    assert definition.icon.resource_path == str(tmp_path / "icon.png")
    assert definition.compile_rules[0].target.opcode == "LOG"


def test_missing_icon_does_not_block_import(write_definition, importer_config):
    path = write_definition("<opcode>X</opcode><icon>missing.png</icon>")
    definition = import_definition(path, config=importer_config)
    assert definition.icon is None
    assert definition.opcode == "X"


def test_import_from_res_path(write_definition, importer_config):
    write_definition("<opcode>RES</opcode>", folder=importer_config.project_root / "defs")
    definition = import_definition("res://defs/definition.xml", config=importer_config)
    assert definition.opcode == "RES"


def test_unknown_element_names_file(write_definition, importer_config, caplog):
    path = write_definition("<opcode>X</opcode><bogus/>")
    with caplog.at_level(logging.ERROR), pytest.raises(ElementNotAllowedError) as exc_info:
        import_definition(path, config=importer_config)
    assert "bogus" in str(exc_info.value)
    assert str(path) in str(exc_info.value)
    assert "bogus" in caplog.text


def test_missing_file(tmp_path, importer_config):
    with pytest.raises(DocumentReadError):
        import_definition(tmp_path / "absent.xml", config=importer_config)


def test_malformed_xml(tmp_path, importer_config):
    path = tmp_path / "bad.xml"
    path.write_text("<definition><opcode>X</definition>")
    with pytest.raises(DocumentReadError):
        import_definition(path, config=importer_config)


def test_nesting_limit_from_config(write_definition, importer_config):
    config = importer_config.model_copy(update={"max_rule_depth": 2})
    path = write_definition("<optionRule><optionRule><optionRule/></optionRule></optionRule>")
    with pytest.raises(RuleNestingTooDeepError):
        import_definition(path, config=config)


def test_very_deep_rule_nesting_is_rejected(write_definition, importer_config, caplog):
    depth = 3000
    path = write_definition("<optionRule>" * depth + "</optionRule>" * depth)
    with caplog.at_level(logging.ERROR), pytest.raises(RuleNestingTooDeepError) as exc_info:
        import_definition(path, config=importer_config)
    assert exc_info.value.depth == importer_config.max_rule_depth + 1
    assert "nested" in caplog.text
