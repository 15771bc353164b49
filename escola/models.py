"""People and subjects of the school register, with their absence records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

SEM_PROFESSOR = "nenhum"
MAX_MATERIAS_POR_PESSOA = 20
MAX_ALUNOS_POR_MATERIA = 50


@dataclass
class Pessoa(ABC):
    """A person known to the register: a student or a teacher."""

    nome: str
    idade: int

    @property
    @abstractmethod
    def funcao(self) -> str:
        """The role of this person in the school."""

    def imprime(self) -> str:
        """Return the common part of the text shown for this person."""
        return f"Nome: {self.nome}\nIdade: {self.idade}\n"


def _adiciona(materias: list[str], nome: str) -> bool:
    if nome in materias or len(materias) >= MAX_MATERIAS_POR_PESSOA:
        return False
    materias.append(nome)
    return True


def _remove(materias: list[str], nome: str) -> bool:
    try:
        materias.remove(nome)
    except ValueError:
        return False
    return True


def _lista(materias: list[str]) -> str:
    return "Materias: \n" + "".join(f"{nome}\n" for nome in materias)


@dataclass
class Aluno(Pessoa):
    """A student, enrolled in up to twenty subjects."""

    ra: int
    curso: str
    materias: list[str] = field(default_factory=list)

    @property
    def funcao(self) -> str:
        return "Aluno"

    def adiciona_materia(self, materia: Materia) -> bool:
        """Enrol in a subject; False if already enrolled or the list is full."""
        return _adiciona(self.materias, materia.nome)

    def remove_materia(self, nome: str) -> bool:
        """Drop the named subject; False if the student was not enrolled."""
        return _remove(self.materias, nome)

    def imprime(self) -> str:
        return (
            f"Nome: {self.nome}\nIdade: {self.idade}\nRA: {self.ra}\n"
            f"Curso: {self.curso}\n" + _lista(self.materias)
        )


@dataclass
class Professor(Pessoa):
    """A teacher, in charge of up to twenty subjects."""

    identificacao: int
    especialidade: str
    materias: list[str] = field(default_factory=list)

    @property
    def funcao(self) -> str:
        return "Professor"

    def adiciona_materia(self, materia: Materia) -> bool:
        """Take charge of a subject; False if already teaching it or the list is full."""
        return _adiciona(self.materias, materia.nome)

    def remove_materia(self, nome: str) -> bool:
        """Give up the named subject; False if the teacher did not teach it."""
        return _remove(self.materias, nome)

    def imprime(self) -> str:
        return (
            f"Nome: {self.nome}\nIdade: {self.idade}\n"
            f"Identificacao: {self.identificacao}\n"
            f"Especialidade: {self.especialidade}\n" + _lista(self.materias)
        )


@dataclass
class Faltas:
    """A student enrolled in a subject and the absences counted there."""

    aluno: str
    faltas: int = 0


@dataclass
class Materia:
    """A subject with its teacher and the absences of each enrolled student."""

    nome: str
    professor: str = SEM_PROFESSOR
    alunos: list[Faltas] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.alunos)

    def definir_professor(self, professor: Professor) -> str:
        """Set the teacher and return the name of the one replaced."""
        antigo, self.professor = self.professor, professor.nome
        return antigo

    def adicionar_aluno(self, aluno: Aluno) -> bool:
        """Enrol a student with no absences; False if present or the class is full."""
        if any(registro.aluno == aluno.nome for registro in self.alunos):
            return False
        if len(self.alunos) >= MAX_ALUNOS_POR_MATERIA:
            return False
        self.alunos.append(Faltas(aluno.nome))
        return True

    def remove_aluno(self, nome: str) -> bool:
        """Remove the named student; False if not enrolled."""
        for registro in self.alunos:
            if registro.aluno == nome:
                self.alunos.remove(registro)
                return True
        return False

    def faltas_de(self, nome: str) -> int:
        """Return the absences of the named student.

        Raises KeyError if the student is not enrolled.
        """
        for registro in self.alunos:
            if registro.aluno == nome:
                return registro.faltas
        raise KeyError(f"Aluno nao encontrado: {nome}")

    def aluno_na_posicao(self, posicao: int) -> str:
        """Return the name of the student at a roll-call position."""
        if not 0 <= posicao < len(self.alunos):
            raise IndexError(f"posicao fora da lista: {posicao}")
        return self.alunos[posicao].aluno

    def acrescentar_falta(self, posicao: int, falta: int) -> None:
        """Add absences to the student at a roll-call position."""
        if not 0 <= posicao < len(self.alunos):
            raise IndexError(f"posicao fora da lista: {posicao}")
        self.alunos[posicao].faltas += falta

    def imprime(self) -> str:
        """Return the text shown for this subject."""
        linhas = "".join(
            f"\n{registro.aluno} Faltas: {registro.faltas}" for registro in self.alunos
        )
        return f"Nome: {self.nome}\nMinistrante: {self.professor}\nAlunos: {linhas}"