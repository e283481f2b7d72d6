from __future__ import annotations

from lineprint.format import terminate_line


# This test checks if terminate_line appends a newline when it is missing.
def test_terminate_line__appends_missing_newline():
    out = terminate_line("hello world")
    assert out == "hello world\n"
    print("\n.✅test_terminate_line__appends_missing_newline passed")


# This test checks if terminate_line leaves an existing trailing newline alone.
def test_terminate_line__keeps_existing_newline():
    assert terminate_line("hello world\n") == "hello world\n"
    print("✅test_terminate_line__keeps_existing_newline passed")


# This test checks if the empty string becomes a bare newline.
def test_terminate_line__empty_string_becomes_newline():
    assert terminate_line("") == "\n"
    print("✅test_terminate_line__empty_string_becomes_newline passed")


# This test checks if a carriage return alone does not count as a terminator.
def test_terminate_line__carriage_return_is_not_newline():
    assert terminate_line("line\r") == "line\r\n"
