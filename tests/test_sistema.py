import pytest

from escola.models import Aluno, Faltas, Materia, Professor
from escola.sistema import Sistema


@pytest.fixture
def sistema(tmp_path):
    return Sistema(
        tmp_path / "aluno", tmp_path / "materias", tmp_path / "professores"
    )


@pytest.fixture
def populado(sistema):
    sistema.adiciona_aluno("Ana", 20, 123, "Fisica")
    sistema.adiciona_aluno("Bruno", 22, 456, "Quimica")
    sistema.adiciona_professor("Carlos", 50, 7, "Calculo")
    sistema.adiciona_professor("Dora", 45, 8, "Algebra")
    sistema.adiciona_materia("Calculo")
    return sistema


def test_adiciona_aluno_and_print(sistema):
    assert sistema.adiciona_aluno("Ana", 20, 123, "Fisica") == "Aluno cadastrado com sucesso!"
    assert sistema.imprimir_aluno("Ana") == Aluno("Ana", 20, 123, "Fisica").imprime()


def test_adiciona_aluno_duplicate(sistema):
    sistema.adiciona_aluno("Ana", 20, 123, "Fisica")
    with pytest.raises(ValueError, match="Aluno já cadastrado"):
        sistema.adiciona_aluno("Ana", 30, 999, "Outro")
    assert "Idade: 20" in sistema.imprimir_aluno("Ana")


def test_adiciona_professor_and_duplicate(sistema):
    assert (
        sistema.adiciona_professor("Carlos", 50, 7, "Calculo")
        == "Professor cadastrado com sucesso!"
    )
    with pytest.raises(ValueError, match="Professor já cadastrado"):
        sistema.adiciona_professor("Carlos", 1, 1, "x")
    assert sistema.imprimir_professor("Carlos") == Professor(
        "Carlos", 50, 7, "Calculo"
    ).imprime()


def test_adiciona_materia_and_duplicate(sistema):
    assert sistema.adiciona_materia("Calculo") == "Matéria cadastrada com sucesso!"
    with pytest.raises(ValueError, match="Matéria já cadastrada"):
        sistema.adiciona_materia("Calculo")
    assert sistema.imprimir_materia("Calculo") == Materia("Calculo").imprime()


def test_print_without_files(sistema):
    with pytest.raises(FileNotFoundError, match="Nenhum aluno cadastrado"):
        sistema.imprimir_aluno("Ana")
    with pytest.raises(FileNotFoundError, match="Nenhum professor cadastrado"):
        sistema.imprimir_professor("Carlos")
    with pytest.raises(FileNotFoundError, match="Nenhum cadastro de matéria realizado"):
        sistema.imprimir_materia("Calculo")


def test_print_unknown_names(populado):
    with pytest.raises(LookupError, match="Aluno não encontrado"):
        populado.imprimir_aluno("Zeca")
    with pytest.raises(LookupError, match="Professor não encontrado"):
        populado.imprimir_professor("Zeca")
    with pytest.raises(LookupError, match="Matéria não encontrada"):
        populado.imprimir_materia("Zeca")


def test_data_persists_across_instances(populado, tmp_path):
    outro = Sistema(tmp_path / "aluno", tmp_path / "materias", tmp_path / "professores")
    assert outro.imprimir_aluno("Bruno") == populado.imprimir_aluno("Bruno")
    assert outro.imprimir_materia("Calculo") == populado.imprimir_materia("Calculo")


def test_adiciona_cursante(populado):
    assert (
        populado.adiciona_cursante("Ana", "Calculo")
        == "Cursante adicionado à matéria com sucesso!"
    )
    assert "Materias: \nCalculo\n" in populado.imprimir_aluno("Ana")
    esperado = Materia("Calculo", alunos=[Faltas("Ana")]).imprime()
    assert populado.imprimir_materia("Calculo") == esperado


def test_adiciona_cursante_twice_refused(populado):
    populado.adiciona_cursante("Ana", "Calculo")
    with pytest.raises(ValueError, match="Erro ao adicionar o aluno a matéria"):
        populado.adiciona_cursante("Ana", "Calculo")
    assert populado.alunos_da_materia("Calculo") == ["Ana"]


def test_adiciona_cursante_unknown(populado):
    with pytest.raises(LookupError, match="Aluno não encontrado"):
        populado.adiciona_cursante("Zeca", "Calculo")
    with pytest.raises(LookupError, match="Matéria não encontrada"):
        populado.adiciona_cursante("Ana", "Historia")


def test_adiciona_cursante_without_files(sistema):
    with pytest.raises(OSError, match="Falha ao abrir o arquivo"):
        sistema.adiciona_cursante("Ana", "Calculo")


def test_adiciona_ministrante(populado):
    assert (
        populado.adiciona_ministrante("Carlos", "Calculo")
        == "Ministrante adicionado à matéria com sucesso!"
    )
    assert "Ministrante: Carlos" in populado.imprimir_materia("Calculo")
    assert populado.imprimir_professor("Carlos").endswith("Materias: \nCalculo\n")


def test_adiciona_ministrante_replaces_old_teacher(populado):
    populado.adiciona_ministrante("Carlos", "Calculo")
    populado.adiciona_ministrante("Dora", "Calculo")
    assert "Ministrante: Dora" in populado.imprimir_materia("Calculo")
    assert populado.imprimir_professor("Carlos").endswith("Materias: \n")
    assert populado.imprimir_professor("Dora").endswith("Materias: \nCalculo\n")


def test_adiciona_ministrante_same_teacher_refused(populado):
    populado.adiciona_ministrante("Carlos", "Calculo")
    with pytest.raises(ValueError, match="Erro ao adicionar o professor a matéria"):
        populado.adiciona_ministrante("Carlos", "Calculo")
    assert populado.imprimir_professor("Carlos").endswith("Materias: \nCalculo\n")


def test_adiciona_ministrante_unknown(populado):
    with pytest.raises(LookupError, match="Professor não encontrado"):
        populado.adiciona_ministrante("Zeca", "Calculo")
    with pytest.raises(LookupError, match="Matéria não encontrada"):
        populado.adiciona_ministrante("Carlos", "Historia")


def test_chamada_accumulates(populado):
    populado.adiciona_cursante("Ana", "Calculo")
    populado.adiciona_cursante("Bruno", "Calculo")
    assert populado.alunos_da_materia("Calculo") == ["Ana", "Bruno"]
    assert populado.fazer_chamada("Calculo", [1, 0]) == "Chamada realizada com sucesso"
    populado.fazer_chamada("Calculo", [1, 1])
    esperado = Materia(
        "Calculo", alunos=[Faltas("Ana", 2), Faltas("Bruno", 1)]
    ).imprime()
    assert populado.imprimir_materia("Calculo") == esperado


def test_chamada_empty_subject(populado):
    with pytest.raises(ValueError, match="Nenhum aluno cadastrado na matéria"):
        populado.fazer_chamada("Calculo", [])


def test_chamada_wrong_count_leaves_record(populado):
    populado.adiciona_cursante("Ana", "Calculo")
    antes = populado.imprimir_materia("Calculo")
    with pytest.raises(ValueError):
        populado.fazer_chamada("Calculo", [1, 1])
    assert populado.imprimir_materia("Calculo") == antes


def test_chamada_unknown_subject(populado):
    with pytest.raises(LookupError, match="Matéria não encontrada"):
        populado.fazer_chamada("Historia", [1])
    with pytest.raises(LookupError, match="Matéria não encontrada"):
        populado.alunos_da_materia("Historia")


def test_chamada_without_file(sistema):
    with pytest.raises(OSError, match="Falha ao abrir o arquivo"):
        sistema.alunos_da_materia("Calculo")