import io

import pytest

from chamada.grades import Gradebook, main, weighted_average
from chamada.roster import Student, StudentNotFound


def _book(*students):
    book = Gradebook()
    for student in students:
        book.enroll(student)
    return book


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


@pytest.mark.parametrize("grade", [0.0, 3.5, 5.0, 10.0])
def test_equal_grades_average_to_themselves(grade):
    assert weighted_average(grade, grade, grade) == pytest.approx(grade)


def test_weights_favour_last_grade():
    assert weighted_average(0, 0, 10) == pytest.approx(5.0)
    assert weighted_average(10, 0, 0) == pytest.approx(2.0)
    assert weighted_average(0, 0, 10) > weighted_average(0, 10, 0)
    assert weighted_average(0, 10, 0) > weighted_average(10, 0, 0)


def test_enroll_puts_newest_first():
    book = _book(Student("Ana", 1), Student("Bia", 2))
    assert [s.registration for s in book.roster] == [2, 1]


def test_enroll_duplicate_registration_raises():
    book = _book(Student("Ana", 1))
    with pytest.raises(ValueError):
        book.enroll(Student("Outra", 1))
    assert len(book.roster) == 1


def test_passing_student_stays_enrolled():
    book = _book(Student("Ana", 1))
    average = book.record_grades(1, [5, 5, 5])
    assert average == pytest.approx(5.0)
    assert 1 in book.roster
    assert len(book.failed) == 0


def test_failing_student_moves_to_failed_queue():
    book = _book(Student("Ana", 1), Student("Bia", 2))
    average = book.record_grades(1, [4, 4, 4])
    assert average == pytest.approx(4.0)
    assert 1 not in book.roster
    assert [(s.name, s.registration) for s in book.failed] == [("Ana", 1)]
    assert [s.registration for s in book.roster] == [2]


def test_failed_queue_keeps_order():
    book = _book(Student("Ana", 1), Student("Bia", 2))
    book.record_grades(2, [0, 0, 0])
    book.record_grades(1, [0, 0, 0])
    assert [s.registration for s in book.failed] == [2, 1]


def test_unknown_registration_raises():
    book = _book(Student("Ana", 1))
    with pytest.raises(StudentNotFound):
        book.record_grades(99, [1, 2, 3])


@pytest.mark.parametrize("grades", [[], [1, 2], [1, 2, 3, 4]])
def test_wrong_number_of_grades_raises(grades):
    book = _book(Student("Ana", 1))
    with pytest.raises(ValueError):
        book.record_grades(1, grades)
    assert 1 in book.roster


def test_render_empty():
    text = Gradebook().render()
    assert "Chamada sem alunos" in text
    assert text.endswith("Nao ha alunos reprovados\n")


def test_render_lists_roster_and_failed():
    book = _book(Student("Ana", 1), Student("Bia", 2))
    book.record_grades(1, [0, 0, 0])
    text = book.render()
    assert "Aluno: Bia | Matricula: 2\n" in text
    assert "Aluno: Ana" not in text
    assert "Reprovados:\n" in text
    assert "Nome: Ana\nMatricula: 1\n" in text
    assert text.index("-- CHAMADA --") < text.index("Reprovados:")


def test_main_enroll_fail_and_print(monkeypatch, capsys):
    script = "1\nAna\n7\n2\n7\n1 1\n1\n3\n4\n"
    code, out = _run(monkeypatch, capsys, script)
    assert code == 0
    assert "Dados cadastrados:\nNome: Ana\nMatricula: 7\n" in out
    assert "Aluno: Ana\n" in out
    assert "ALuno nao aprovado.\nAluno removido.\n" in out
    assert "Chamada sem alunos" in out
    assert "Nome: Ana\nMatricula: 7\n" in out
    assert out.endswith("Tchau...\n")


def test_main_rejects_bad_name_and_duplicate(monkeypatch, capsys):
    script = "1\nAna1\nAna\n7\n1\nBia\n7\n8\n3\n4\n"
    _, out = _run(monkeypatch, capsys, script)
    assert "Ninguem no mundo tem um numero no nome!!!" in out
    assert "Matricula ja adicionada. Tente outra:" in out
    assert "Aluno: Bia | Matricula: 8\n" in out


def test_main_unknown_registration_and_option(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "2\n55\n9\n4\n")
    assert "Matricula: 55 nao encontrada." in out
    assert "Aina nao temos essa opca4o." in out


def test_main_passing_student_not_removed(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1\nAna\n7\n2\n7\n9 9 9\n3\n4\n")
    assert "ALuno nao aprovado." not in out
    assert "Aluno: Ana | Matricula: 7" in out
    assert "Nao ha alunos reprovados" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\nAna\n")
    assert code == 0
    assert "Tchau..." not in out