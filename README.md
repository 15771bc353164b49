# escola

A small school register. It keeps students (`Aluno`), teachers
(`Professor`) and subjects (`Materia`) in three local files, enrols
students in subjects, puts a teacher in charge of each subject, and counts
each student's absences through a roll call.

No third-party libraries are needed.

## Installation

```
pip install .
```

## Command line

```
escola
```

opens a text menu on standard input and output:

```
SISTEMA DE ADMINISTRACAO DE ALUNOS E MATERIAS
0- Finalizar sistema
1- Cadastrar um aluno
2- Cadastrar um professor
3- Cadastrar uma materia
4- Adicionar um aluno como cursante de uma materia
5- Adicionar um professor como ministrante de uma materia
6- Imprimir dados de um aluno
7- Imprimir dados de um professor
8- Imprimir dados de uma materia
9- Fazer chamada
```

Each choice asks for the fields it needs, one per line, and then prints a
status message or the requested record. Option 9 asks for a subject and
then, for each enrolled student in turn, the number of absences to add.
A number that cannot be read prints `Valor inválido`; an unknown choice
shows the menu again. The program stops on option `0` or at the end of
the input.

By default the records are kept in the files `aluno`, `materias` and
`professores` in the current directory. Other paths can be given:

```
escola --alunos alunos.json --materias materias.json --professores professores.json
```

The menu can also be driven from code with `escola.cli.run(sistema,
entrada, saida)`, which reads from and writes to any text streams.

## Library use

```python
from escola.sistema import Sistema

sistema = Sistema("aluno", "materias", "professores")
print(sistema.adiciona_aluno("Ana", 20, 1234, "Fisica"))
print(sistema.adiciona_professor("Carlos", 45, 7, "Mecanica"))
print(sistema.adiciona_materia("Calculo"))
print(sistema.adiciona_cursante("Ana", "Calculo"))
print(sistema.adiciona_ministrante("Carlos", "Calculo"))

print(sistema.alunos_da_materia("Calculo"))   # ['Ana']
sistema.fazer_chamada("Calculo", [1])         # one absence for Ana
print(sistema.imprimir_materia("Calculo"))
```

A successful operation returns its status message, such as
`"Aluno cadastrado com sucesso!"`; the `imprimir_*` methods return the
text describing the record. A failed operation raises, and the exception
text is the message to show:

- `FileNotFoundError` when a file has not been created yet (for the
  `imprimir_*` methods the message says nothing has been registered, e.g.
  `"Nenhum aluno cadastrado"`), and `OSError` with
  `"Falha ao abrir o arquivo"` for other file problems;
- `LookupError` for an unknown name, e.g. `"Matéria não encontrada"`;
- `ValueError` for a refused operation, e.g. `"Aluno já cadastrado"`,
  `"Erro ao adicionar o aluno a matéria"`, or a roll call on a subject with
  no students or with the wrong number of absences.

When a teacher is put in charge of a subject, the teacher who was in
charge before loses that subject from their list.

Records are stored as JSON, one list per file.

## Records

`escola.models` holds the record classes:

- `Pessoa`, the common base with `nome` and `idade`;
- `Aluno` (`ra`, `curso`, `materias`) and `Professor` (`identificacao`,
  `especialidade`, `materias`), each holding at most 20 subjects, with
  `adiciona_materia`, `remove_materia` and `imprime`;
- `Materia` (`nome`, `professor`, `alunos`), holding at most 50 students,
  with `definir_professor`, `adicionar_aluno`, `remove_aluno`, `faltas_de`,
  `aluno_na_posicao`, `acrescentar_falta` and `imprime`;
- `Faltas`, a student's name and absence count within a subject.

## What it does not do

There is only the text menu; there is no windowed interface. Records can
be added and linked but not edited or deleted through `Sistema` or the
menu: students cannot be withdrawn from a subject, and a subject cannot be
left without a teacher once one is assigned.

## Tests

```
pip install .[test]
pytest
```