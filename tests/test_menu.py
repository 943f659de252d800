import io

import pytest

from linkedkit.menu import main, run_menu


def _run(lines):
    out = io.StringIO()
    queue = run_menu(lines, out)
    return queue, out.getvalue()


def test_insert_and_display():
    queue, text = _run(["1", "10", "1", "20", "3", "0"])
    assert list(queue) == [10, 20]
    assert "Elements of the queue are : \n| 10 | - | 20 | - \n" in text
    assert text.count("Elemnt gets inserted succesfully\n") == 2


def test_dequeue_is_fifo():
    queue, text = _run(["1 11", "1 21", "2", "0"])
    assert list(queue) == [21]
    assert "Element removed from queue is : 11\n" in text


def test_dequeue_empty_reports():
    queue, text = _run(["2", "0"])
    assert len(queue) == 0
    assert "Queue is empty\n" in text
    assert "Element removed" not in text


def test_display_empty():
    _, text = _run(["3", "0"])
    assert "Elements of the queue are : \nQueue is empty\n" in text


def test_count():
    queue, text = _run(["1", "5", "1", "6", "1", "7", "4", "0"])
    assert len(queue) == 3
    assert "Number of elements in queue are : 3\n" in text


def test_invalid_option():
    _, text = _run(["9", "0"])
    assert "Please enter the valid option\n" in text


def test_exit_message_and_stops():
    queue, text = _run(["0", "1", "99"])
    assert text.endswith("Thank you for using our application\n")
    assert len(queue) == 0


def test_end_of_input_ends_session():
    queue, text = _run(["1", "42"])
    assert list(queue) == [42]
    assert "Thank you" not in text
    assert text.startswith("Queue gets created succesfully...\n")


def test_negative_one_can_be_removed():
    queue, text = _run(["1", "-1", "2", "0"])
    assert len(queue) == 0
    assert "Element removed from queue is : -1\n" in text


def test_non_integer_value_rejected():
    queue, text = _run(["1", "abc", "0"])
    assert len(queue) == 0
    assert "Please enter the valid option\n" in text


def test_menu_shown_each_round():
    _, text = _run(["4", "4", "0"])
    assert text.count("0 : Exit the application\n") == 3


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n8\n3\n0\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "| 8 | - \n" in captured


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit):
        main(["--bogus"])