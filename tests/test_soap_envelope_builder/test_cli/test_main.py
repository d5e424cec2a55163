"""Tests for the CLI main module."""

import json
from unittest.mock import patch

import pytest

from soap_envelope_builder.cli.main import (
    build_fault_envelope,
    build_serializer_config,
    create_argument_parser,
    main,
)
from soap_envelope_builder.envelope import SoapVersion

SOAP11_NS = "http://schemas.xmlsoap.org/soap/envelope/"


@pytest.fixture
def definition(tmp_path):
    path = tmp_path / "ghost.json"
    path.write_text(json.dumps({
        "version": "1.1",
        "envelope_prefix": "soap",
        "body": [{"name": "pong", "content": "ok"}],
    }), encoding="utf-8")
    return path


class TestArgumentParser:
    """Test argument parsing."""

    def test_fault_defaults(self):
        args = create_argument_parser().parse_args(
            ["fault", "--code", "soapenv:Server", "--message", "Boom"]
        )

        assert args.command == "fault"
        assert args.soap_version == "1.2"
        assert args.prefix == "soapenv"
        assert args.subcode == []
        assert args.indent == 2
        assert args.compact is False
        assert args.output is None

    def test_repeated_subcodes(self):
        args = create_argument_parser().parse_args([
            "fault", "--code", "env:Sender", "--message", "m",
            "--subcode", "a", "--subcode", "b",
        ])

        assert args.subcode == ["a", "b"]

    def test_rejects_unknown_version(self):
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(
                ["fault", "--soap-version", "2.0", "--code", "c", "--message", "m"]
            )

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert "0.1.0" in capsys.readouterr().out


class TestHelpers:
    """Test argument-to-object mapping."""

    def test_serializer_config(self):
        parser = create_argument_parser()

        compact = build_serializer_config(parser.parse_args(["render", "x.json", "--compact"]))
        pretty = build_serializer_config(parser.parse_args(["render", "x.json", "--indent", "4"]))

        assert compact.pretty_print is False
        assert pretty.indent == "    "

    def test_build_soap11_fault(self):
        args = create_argument_parser().parse_args([
            "fault", "--soap-version", "1.1", "--code", "soapenv:Client",
            "--message", "Bad ghost", "--actor", "http://ghosts",
        ])

        envelope = build_fault_envelope(args)

        assert envelope.version is SoapVersion.V1_1
        assert (
            "<soapenv:Fault><faultcode>soapenv:Client</faultcode>"
            "<faultstring>Bad ghost</faultstring>"
            "<faultactor>http://ghosts</faultactor></soapenv:Fault>"
        ) in str(envelope)

    def test_build_soap12_fault(self):
        args = create_argument_parser().parse_args([
            "fault", "--prefix", "env", "--code", "env:Sender", "--message", "Nope",
            "--subcode", "ns:a", "--subcode", "ns:b", "--lang", "fr",
            "--node", "http://node", "--role", "http://role",
        ])

        document = str(build_fault_envelope(args))

        assert (
            "<env:Code><env:Value>env:Sender</env:Value>"
            "<env:Subcode><env:Value>ns:a</env:Value>"
            "<env:Subcode><env:Value>ns:b</env:Value></env:Subcode></env:Subcode>"
            "</env:Code>"
        ) in document
        assert '<env:Text xml:lang="fr">Nope</env:Text>' in document
        assert "<env:Node>http://node</env:Node><env:Role>http://role</env:Role>" in document


class TestMain:
    """Test the CLI entry point end to end."""

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_render_to_stdout(self, definition, capsys):
        assert main(["render", str(definition), "--compact"]) == 0

        out = capsys.readouterr().out
        assert out == (
            '<?xml version="1.0" encoding="UTF-8"?>'
            f'<soap:Envelope xmlns:soap="{SOAP11_NS}">'
            "<soap:Body><pong>ok</pong></soap:Body></soap:Envelope>\n"
        )

    def test_render_pretty_indent(self, definition, capsys):
        assert main(["render", str(definition), "--indent", "4"]) == 0

        assert "\n        <pong>ok</pong>\n" in capsys.readouterr().out

    def test_render_to_file(self, definition, tmp_path, capsys):
        output = tmp_path / "out.xml"

        assert main(["render", str(definition), "-o", str(output)]) == 0

        assert output.read_text(encoding="utf-8").startswith('<?xml version="1.0"')
        assert "Envelope written to" in capsys.readouterr().err

    def test_render_missing_file(self, tmp_path, capsys):
        assert main(["render", str(tmp_path / "missing.json")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_render_invalid_definition(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text('{"body": [{"kind": "element"}]}', encoding="utf-8")

        assert main(["render", str(path)]) == 1
        assert "Error: $.body[0]: missing 'name'" in capsys.readouterr().err

    def test_negative_indent(self, definition, capsys):
        assert main(["render", str(definition), "--indent", "-1"]) == 1
        assert "--indent must be >= 0" in capsys.readouterr().err

    def test_fault_command(self, capsys):
        code = main([
            "fault", "--soap-version", "1.1", "--prefix", "soap",
            "--code", "soap:Server", "--message", "Registry down", "--compact",
        ])

        assert code == 0
        assert (
            "<soap:Body><soap:Fault><faultcode>soap:Server</faultcode>"
            "<faultstring>Registry down</faultstring></soap:Fault></soap:Body>"
        ) in capsys.readouterr().out

    @pytest.mark.parametrize("argv, message", [
        (["--soap-version", "1.1", "--subcode", "a"], "reason requires SOAP 1.2"),
        (["--soap-version", "1.1", "--node", "http://n"], "node requires SOAP 1.2"),
        (["--actor", "http://a"], "fault_actor requires SOAP 1.1"),
    ])
    def test_fault_version_mismatch(self, argv, message, capsys):
        code = main(["fault", "--code", "c", "--message", "m"] + argv)

        assert code == 1
        assert f"Error: {message}" in capsys.readouterr().err

    def test_keyboard_interrupt(self, definition, capsys):
        with patch("soap_envelope_builder.cli.main.cmd_render", side_effect=KeyboardInterrupt):
            assert main(["render", str(definition)]) == 130

        assert "interrupted" in capsys.readouterr().err

