"""Text menu for the school register."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from escola.sistema import Sistema

MENU = (
    "SISTEMA DE ADMINISTRACAO DE ALUNOS E MATERIAS\n"
    "0- Finalizar sistema\n"
    "1- Cadastrar um aluno\n"
    "2- Cadastrar um professor\n"
    "3- Cadastrar uma materia\n"
    "4- Adicionar um aluno como cursante de uma materia\n"
    "5- Adicionar um professor como ministrante de uma materia\n"
    "6- Imprimir dados de um aluno\n"
    "7- Imprimir dados de um professor\n"
    "8- Imprimir dados de uma materia\n"
    "9- Fazer chamada\n"
)

VALOR_INVALIDO = "Valor inválido"


class _FimDaEntrada(Exception):
    """The input ended in the middle of an operation."""


class _ValorInvalido(ValueError):
    pass


class _Console:
    def __init__(self, entrada: TextIO, saida: TextIO) -> None:
        self.entrada = entrada
        self.saida = saida

    def escrever(self, texto: str) -> None:
        self.saida.write(texto)
        self.saida.flush()

    def linha(self) -> str:
        lida = self.entrada.readline()
        if not lida:
            raise _FimDaEntrada
        return lida.rstrip("\r\n")

    def perguntar(self, prompt: str) -> str:
        self.escrever(prompt)
        return self.linha()

    def inteiro(self, prompt: str) -> int:
        texto = self.perguntar(prompt).strip()
        try:
            return int(texto)
        except ValueError:
            raise _ValorInvalido(VALOR_INVALIDO) from None


def _cadastrar_aluno(sistema: Sistema, console: _Console) -> str:
    console.escrever("Preencha os seguintes campos abaixo:\n")
    nome = console.perguntar("Nome: ")
    idade = console.inteiro("Idade: ")
    ra = console.inteiro("RA: ")
    curso = console.perguntar("Curso: ")
    return sistema.adiciona_aluno(nome, idade, ra, curso)


def _cadastrar_professor(sistema: Sistema, console: _Console) -> str:
    console.escrever("Preencha os seguintes campos abaixo:\n")
    nome = console.perguntar("Nome: ")
    idade = console.inteiro("Idade: ")
    identificacao = console.inteiro("Identificacao: ")
    especialidade = console.perguntar("Especialidade: ")
    return sistema.adiciona_professor(nome, idade, identificacao, especialidade)


def _cadastrar_materia(sistema: Sistema, console: _Console) -> str:
    nome = console.perguntar("Digite o nome da Materia: ")
    return sistema.adiciona_materia(nome)


def _adicionar_cursante(sistema: Sistema, console: _Console) -> str:
    aluno = console.perguntar("Digite o nome do aluno: ")
    materia = console.perguntar("Digite o nome da materia: ")
    return sistema.adiciona_cursante(aluno, materia)


def _adicionar_ministrante(sistema: Sistema, console: _Console) -> str:
    professor = console.perguntar("Digite o nome do professor: ")
    materia = console.perguntar("Digite o nome da materia: ")
    return sistema.adiciona_ministrante(professor, materia)


def _imprimir_aluno(sistema: Sistema, console: _Console) -> str:
    return sistema.imprimir_aluno(console.perguntar("Nome do Aluno: "))


def _imprimir_professor(sistema: Sistema, console: _Console) -> str:
    return sistema.imprimir_professor(console.perguntar("Nome do Professor: "))


def _imprimir_materia(sistema: Sistema, console: _Console) -> str:
    return sistema.imprimir_materia(console.perguntar("Nome da Materia: "))


def _fazer_chamada(sistema: Sistema, console: _Console) -> str:
    materia = console.perguntar("Digite o nome da materia: ")
    alunos = sistema.alunos_da_materia(materia)
    faltas = [console.inteiro(f"{aluno} ") for aluno in alunos]
    return sistema.fazer_chamada(materia, faltas)


_ACOES: dict[int, Callable[[Sistema, _Console], str]] = {
    1: _cadastrar_aluno,
    2: _cadastrar_professor,
    3: _cadastrar_materia,
    4: _adicionar_cursante,
    5: _adicionar_ministrante,
    6: _imprimir_aluno,
    7: _imprimir_professor,
    8: _imprimir_materia,
    9: _fazer_chamada,
}


def run(sistema: Sistema, entrada: TextIO, saida: TextIO) -> None:
    """Show the menu and carry out choices until option 0 or end of input."""
    console = _Console(entrada, saida)
    while True:
        console.escrever(MENU)
        try:
            escolha = console.linha().strip()
        except _FimDaEntrada:
            return
        try:
            opcao = int(escolha)
        except ValueError:
            continue
        if opcao == 0:
            return
        acao = _ACOES.get(opcao)
        if acao is None:
            continue
        try:
            mensagem = acao(sistema, console)
        except _FimDaEntrada:
            console.escrever("\n")
            return
        except (OSError, LookupError, ValueError) as exc:
            mensagem = str(exc)
        console.escrever(f"{mensagem}\n")


def main(argv: list[str] | None = None) -> int:
    """Run the text menu on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Register of students, teachers and subjects."
    )
    parser.add_argument("--alunos", default="aluno", help="students file")
    parser.add_argument("--materias", default="materias", help="subjects file")
    parser.add_argument("--professores", default="professores", help="teachers file")
    args = parser.parse_args(argv)
    sistema = Sistema(args.alunos, args.materias, args.professores)
    run(sistema, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())