"""Tests for the command-line client."""

import io
import json

import pytest
import requests

from linkfwd.cli import LinkForwarderCLI, build_parser, main


class FakeResponse:
    """Minimal stand-in for requests.Response."""
    
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self._text = text
    
    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._body


class FakeSession:
    """Records requests and replays queued responses."""
    
    def __init__(self, *responses, error=None):
        self.responses = list(responses)
        self.error = error
        self.calls = []
    
    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


def make_cli(session, **kwargs):
    out = io.StringIO()
    cli = LinkForwarderCLI(
        server_url="http://links.local:8080/",
        session=session,
        out=out,
        **kwargs
    )
    return cli, out


class TestParseAddArgument:
    """Test 'shortcode,url' parsing."""
    
    def test_splits_on_first_comma(self):
        assert LinkForwarderCLI.parse_add_argument("q,example.com/?a=1,2") == (
            "q",
            "example.com/?a=1,2",
        )
    
    def test_strips_whitespace(self):
        assert LinkForwarderCLI.parse_add_argument(" gh , github.com ") == ("gh", "github.com")
    
    def test_missing_comma(self):
        with pytest.raises(ValueError, match="Invalid format"):
            LinkForwarderCLI.parse_add_argument("google")
    
    @pytest.mark.parametrize("value", [",github.com", "gh,", " , "])
    def test_empty_part(self, value):
        with pytest.raises(ValueError, match="Both shortcode and URL are required"):
            LinkForwarderCLI.parse_add_argument(value)


class TestCommands:
    """Test add, list and delete against a fake server."""
    
    def test_add(self):
        session = FakeSession(FakeResponse(200, {
            "success": True,
            "message": "Link saved successfully",
            "data": {"shortcode": "gh", "url": "https://github.com", "created_at": None},
        }))
        cli, out = make_cli(session)
        
        assert cli.add("gh,github.com") == 0
        
        method, url, kwargs = session.calls[0]
        assert (method, url) == ("POST", "http://links.local:8080/api/links")
        assert kwargs["json"] == {"shortcode": "gh", "url": "github.com"}
        assert out.getvalue().splitlines() == [
            "✓ Link added: gh -> https://github.com",
            "  http://links.local:8080/gh",
        ]
    
    def test_add_invalid_format_sends_nothing(self):
        session = FakeSession()
        cli, out = make_cli(session)
        
        assert cli.add("google") == 1
        
        assert session.calls == []
        assert out.getvalue().startswith("Error: Invalid format")
    
    def test_add_server_error(self):
        session = FakeSession(FakeResponse(400, {
            "success": False,
            "message": "Shortcode and URL are required",
        }))
        cli, out = make_cli(session)
        
        assert cli.add("gh,github.com") == 1
        assert out.getvalue().strip() == "Error: Shortcode and URL are required"
    
    def test_list(self):
        session = FakeSession(FakeResponse(200, {
            "success": True,
            "message": "Links retrieved successfully",
            "data": [
                {"shortcode": "github", "url": "https://github.com"},
                {"shortcode": "g", "url": "https://www.google.com"},
            ],
        }))
        cli, out = make_cli(session)
        
        assert cli.list_links() == 0
        
        lines = out.getvalue().splitlines()
        assert lines[0].split() == ["SHORTCODE", "URL"]
        assert lines[1].split() == ["---------", "---"]
        assert lines[2] == "github      https://github.com"
        assert lines[3] == "g           https://www.google.com"
    
    def test_list_empty(self):
        session = FakeSession(FakeResponse(200, {
            "success": True,
            "message": "Links retrieved successfully",
            "data": [],
        }))
        cli, out = make_cli(session)
        
        assert cli.list_links() == 0
        assert out.getvalue().strip() == "No links found"
    
    def test_delete(self):
        session = FakeSession(FakeResponse(200, {
            "success": True,
            "message": "Link deleted successfully",
        }))
        cli, out = make_cli(session)
        
        assert cli.delete("my link") == 0
        
        method, url, _ = session.calls[0]
        assert (method, url) == ("DELETE", "http://links.local:8080/api/links/my%20link")
        assert out.getvalue().strip() == "✓ Link deleted: my link"
    
    def test_delete_missing(self):
        session = FakeSession(FakeResponse(404, {
            "success": False,
            "message": "shortcode not found",
        }))
        cli, out = make_cli(session)
        
        assert cli.delete("missing") == 1
        assert out.getvalue().strip() == "Error: shortcode not found"
    
    def test_delete_empty(self):
        session = FakeSession()
        cli, out = make_cli(session)
        
        assert cli.delete("  ") == 1
        assert session.calls == []
    
    def test_json_output(self):
        envelope = {"success": True, "message": "Links retrieved successfully", "data": []}
        session = FakeSession(FakeResponse(200, envelope))
        cli, out = make_cli(session, json_output=True)
        
        assert cli.list_links() == 0
        assert json.loads(out.getvalue()) == envelope


class TestTransportErrors:
    """Test connection and decoding failures."""
    
    def test_connection_error(self):
        session = FakeSession(error=requests.ConnectionError("refused"))
        cli, out = make_cli(session)
        
        assert cli.list_links() == 1
        assert out.getvalue().startswith("Error: Failed to connect to server:")
    
    def test_non_json_body(self):
        session = FakeSession(FakeResponse(502, text="<html>Bad Gateway</html>"))
        cli, out = make_cli(session)
        
        assert cli.list_links() == 1
        assert out.getvalue().startswith("Error: Failed to decode response:")
    
    def test_json_without_envelope(self):
        session = FakeSession(FakeResponse(200, ["not", "an", "envelope"]))
        cli, out = make_cli(session)
        
        assert cli.list_links() == 1
        assert "Unexpected response (HTTP 200)" in out.getvalue()


class TestParser:
    """Test argument parsing and main()."""
    
    def test_server_from_environment(self, monkeypatch):
        monkeypatch.setenv("LINKFWD_SERVER", "http://env.local:9000")
        
        args = build_parser().parse_args(["list"])
        
        assert args.server == "http://env.local:9000"
        assert args.command == "list"
    
    def test_add_arguments(self):
        args = build_parser().parse_args(["--server", "http://x", "--json", "add", "gh,github.com"])
        
        assert args.server == "http://x"
        assert args.json is True
        assert args.link == "gh,github.com"
    
    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()
    
    def test_main_dispatches(self, monkeypatch):
        calls = []
        monkeypatch.setattr(LinkForwarderCLI, "delete", lambda self, code: calls.append(code) or 0)
        
        assert main(["delete", "gh"]) == 0
        assert calls == ["gh"]
