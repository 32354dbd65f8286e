from design_kata.journal_demo import run_journal_demo
from design_kata.product_demo import run_product_demo


def test_product_demo_output(capsys):
    run_product_demo()

    assert capsys.readouterr().out == "tree is green\napple is green\n=====\nocean is blue\n"


def test_journal_demo_output(capsys):
    journal = run_journal_demo()

    assert capsys.readouterr().out == "first\nsecond\nfirst\nSave is completed\n"
    assert journal.count == 2
    assert journal.entries == ["first"]


class RecordingPersistence:
    def __init__(self):
        self.calls = []

    def save_to_file(self, journal, filename, overwrite=False):
        self.calls.append((journal.render(), filename, overwrite))


def test_journal_demo_delegates_to_given_backend(capsys):
    backend = RecordingPersistence()

    run_journal_demo(filename="notes.txt", overwrite=True, persistence=backend)

    assert backend.calls == [("first", "notes.txt", True)]
    assert capsys.readouterr().out == "first\nsecond\nfirst\n"
