"""Tests for the stdin shipping entry point."""

import io

import pytest

from main import main


pytestmark = pytest.mark.usefixtures("clean_env")


class TestMain:
    def test_ships_stdin_lines(self, udp_receiver):
        receiver, port = udp_receiver
        stream = io.StringIO("first line\n\nsecond line\r\n")
        rc = main(["--host", "127.0.0.1", "--port", str(port), "--level", "warn"],
                  stream=stream)
        assert rc == 0
        assert receiver.recvfrom(4096)[0] == b"<12>first line"
        assert receiver.recvfrom(4096)[0] == b"<12>second line"

    def test_facility_flag(self, udp_receiver):
        receiver, port = udp_receiver
        main(["--host", "127.0.0.1", "--port", str(port), "--facility", "local0"],
             stream=io.StringIO("hello\n"))
        assert receiver.recvfrom(4096)[0] == b"<134>hello"

    def test_unknown_level_exits(self):
        with pytest.raises(SystemExit):
            main(["--level", "loud"], stream=io.StringIO(""))

    def test_dropped_lines_set_exit_code(self):
        rc = main(["--host", "127.0.0.1", "--port", "1", "--transport", "tcp"],
                  stream=io.StringIO("nobody home\n"))
        assert rc == 1

    def test_out_of_range_port_exits(self):
        with pytest.raises(SystemExit):
            main(["--port", "70000"], stream=io.StringIO(""))
