"""File-backed register of students, teachers and subjects."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from dataclasses import asdict
from pathlib import Path
from typing import Any, TypeVar

from escola.models import Aluno, Faltas, Materia, Professor

_T = TypeVar("_T")

FALHA_ARQUIVO = "Falha ao abrir o arquivo"


def _aluno(dados: dict[str, Any]) -> Aluno:
    return Aluno(**dados)


def _professor(dados: dict[str, Any]) -> Professor:
    return Professor(**dados)


def _materia(dados: dict[str, Any]) -> Materia:
    return Materia(
        dados["nome"],
        dados["professor"],
        [Faltas(**registro) for registro in dados["alunos"]],
    )


def _posicao(registros: list[Any], nome: str) -> int | None:
    return next(
        (indice for indice, registro in enumerate(registros) if registro.nome == nome),
        None,
    )


class Sistema:
    """Keeps students, teachers and subjects in three record files.

    Operations that succeed return the status text shown to the user.
    Failures raise: ``OSError`` (``FileNotFoundError`` when nothing has been
    registered yet) for file problems, ``LookupError`` for unknown names and
    ``ValueError`` for refused operations. The exception text is the status
    message to show.
    """

    def __init__(self, arquivo_alunos, arquivo_materias, arquivo_professores):
        self.arquivo_alunos = Path(arquivo_alunos)
        self.arquivo_materias = Path(arquivo_materias)
        self.arquivo_professores = Path(arquivo_professores)

    # -- storage -----------------------------------------------------------

    @staticmethod
    def _garantir(arquivo: Path) -> None:
        try:
            arquivo.touch(exist_ok=True)
        except OSError as exc:
            raise OSError(FALHA_ARQUIVO) from exc

    @staticmethod
    def _ler(
        arquivo: Path,
        fabrica: Callable[[dict[str, Any]], _T],
        ausente: str = FALHA_ARQUIVO,
    ) -> list[_T]:
        try:
            texto = arquivo.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise FileNotFoundError(ausente) from exc
        except OSError as exc:
            raise OSError(FALHA_ARQUIVO) from exc
        if not texto.strip():
            return []
        return [fabrica(dados) for dados in json.loads(texto)]

    @staticmethod
    def _gravar(arquivo: Path, registros: Iterable[Any]) -> None:
        try:
            arquivo.write_text(
                json.dumps([asdict(registro) for registro in registros], ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as exc:
            raise OSError(FALHA_ARQUIVO) from exc

    def _materia_existente(self, materias: list[Materia], nome: str) -> int:
        posicao = _posicao(materias, nome)
        if posicao is None:
            raise LookupError("Matéria não encontrada")
        return posicao

    # -- registration ------------------------------------------------------

    def adiciona_aluno(self, nome, idade, ra, curso):
        """Register a new student."""
        self._garantir(self.arquivo_alunos)
        alunos = self._ler(self.arquivo_alunos, _aluno)
        if _posicao(alunos, nome) is not None:
            raise ValueError("Aluno já cadastrado")
        alunos.append(Aluno(nome, idade, ra, curso))
        self._gravar(self.arquivo_alunos, alunos)
        return "Aluno cadastrado com sucesso!"

    def adiciona_professor(self, nome, idade, identificacao, especialidade):
        """Register a new teacher."""
        self._garantir(self.arquivo_professores)
        professores = self._ler(self.arquivo_professores, _professor)
        if _posicao(professores, nome) is not None:
            raise ValueError("Professor já cadastrado")
        professores.append(Professor(nome, idade, identificacao, especialidade))
        self._gravar(self.arquivo_professores, professores)
        return "Professor cadastrado com sucesso!"

    def adiciona_materia(self, nome):
        """Register a new subject with no teacher and no students."""
        self._garantir(self.arquivo_materias)
        materias = self._ler(self.arquivo_materias, _materia)
        if _posicao(materias, nome) is not None:
            raise ValueError("Matéria já cadastrada")
        materias.append(Materia(nome))
        self._gravar(self.arquivo_materias, materias)
        return "Matéria cadastrada com sucesso!"

    # -- relations ---------------------------------------------------------

    def adiciona_cursante(self, aluno, materia):
        """Enrol a registered student in a registered subject."""
        alunos = self._ler(self.arquivo_alunos, _aluno)
        pos_aluno = _posicao(alunos, aluno)
        if pos_aluno is None:
            raise LookupError("Aluno não encontrado")
        materias = self._ler(self.arquivo_materias, _materia)
        pos_materia = self._materia_existente(materias, materia)

        registro_aluno = alunos[pos_aluno]
        registro_materia = materias[pos_materia]
        if not (
            registro_materia.adicionar_aluno(registro_aluno)
            and registro_aluno.adiciona_materia(registro_materia)
        ):
            raise ValueError("Erro ao adicionar o aluno a matéria")

        self._gravar(self.arquivo_materias, materias)
        self._gravar(self.arquivo_alunos, alunos)
        return "Cursante adicionado à matéria com sucesso!"

    def adiciona_ministrante(self, professor, materia):
        """Make a registered teacher the one in charge of a subject.

        The teacher who was in charge before, if registered, loses the subject.
        """
        professores = self._ler(self.arquivo_professores, _professor)
        pos_professor = _posicao(professores, professor)
        if pos_professor is None:
            raise LookupError("Professor não encontrado")
        materias = self._ler(self.arquivo_materias, _materia)
        pos_materia = self._materia_existente(materias, materia)

        novo = professores[pos_professor]
        registro_materia = materias[pos_materia]
        antigo = registro_materia.definir_professor(novo)
        pos_antigo = _posicao(professores, antigo)
        if not novo.adiciona_materia(registro_materia):
            raise ValueError("Erro ao adicionar o professor a matéria")
        if pos_antigo is not None and pos_antigo != pos_professor:
            professores[pos_antigo].remove_materia(registro_materia.nome)

        self._gravar(self.arquivo_materias, materias)
        self._gravar(self.arquivo_professores, professores)
        return "Ministrante adicionado à matéria com sucesso!"

    # -- roll call ---------------------------------------------------------

    def alunos_da_materia(self, materia):
        """Return the names of a subject's students in roll-call order."""
        materias = self._ler(self.arquivo_materias, _materia)
        registro = materias[self._materia_existente(materias, materia)]
        return [faltas.aluno for faltas in registro.alunos]

    def fazer_chamada(self, materia, faltas):
        """Add one roll call's absences, given in roll-call order, to a subject."""
        materias = self._ler(self.arquivo_materias, _materia)
        registro = materias[self._materia_existente(materias, materia)]
        if not registro.alunos:
            raise ValueError("Nenhum aluno cadastrado na matéria")
        valores = list(faltas)
        if len(valores) != len(registro):
            raise ValueError(
                f"esperadas {len(registro)} faltas, recebidas {len(valores)}"
            )
        for posicao, falta in enumerate(valores):
            registro.acrescentar_falta(posicao, falta)
        self._gravar(self.arquivo_materias, materias)
        return "Chamada realizada com sucesso"

    # -- queries -----------------------------------------------------------

    def imprimir_aluno(self, nome):
        """Return the text describing a registered student."""
        alunos = self._ler(self.arquivo_alunos, _aluno, "Nenhum aluno cadastrado")
        posicao = _posicao(alunos, nome)
        if posicao is None:
            raise LookupError("Aluno não encontrado")
        return alunos[posicao].imprime()

    def imprimir_professor(self, nome):
        """Return the text describing a registered teacher."""
        professores = self._ler(
            self.arquivo_professores, _professor, "Nenhum professor cadastrado"
        )
        posicao = _posicao(professores, nome)
        if posicao is None:
            raise LookupError("Professor não encontrado")
        return professores[posicao].imprime()

    def imprimir_materia(self, nome):
        """Return the text describing a registered subject."""
        materias = self._ler(
            self.arquivo_materias, _materia, "Nenhum cadastro de matéria realizado"
        )
        return materias[self._materia_existente(materias, nome)].imprime()