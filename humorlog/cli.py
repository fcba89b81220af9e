"""Interactive menu for keeping a mood journal."""

import argparse
import re
import sys

from humorlog.journal import MoodJournal, RecordNotFoundError
from humorlog.record import (
    MAX_REASON_LENGTH,
    REASON_TOO_LONG,
    InvalidRecordError,
    MoodRecord,
    RecordFactory,
    parse_mood,
    validate_date,
)

MENU = (
    "\n----------------MENU------------------\n"
    "1 - Adicionar novo registro\n"
    "2 - Remover registro por id\n"
    "3 - Buscar por humor\n"
    "4 - Imprimir todos os registros\n"
    "5 - Mostrar média da notaDoDia\n"
    "6 - Mostrar humor mais frequente\n"
    "7 - Mostrar os motivos do humor\n"
    "8 - Sair\n"
    "Escolha uma opção: "
)
SEPARATOR = "\n--------------------------------------\n"
MOOD_MENU = "\n0- Feliz\n1-Triste\n2-Ansioso\n3-Cansado\n4-Motivado\n5-Estressado\n6-Neutro\nResposta: "
EXIT_OPTION = 8

_INT_PREFIX = re.compile(r"[+-]?\d+")
_NON_SPACE_RUN = re.compile(r"\S+")


class _Scanner:
    """Reads whitespace-separated integers and whole lines from a text stream."""

    def __init__(self, stream):
        self._stream = stream
        self._buffer = ""

    def _skip_whitespace(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buffer = line

    def read_int(self):
        """Next integer, or None if the next word is not one (the word is consumed)."""
        self._skip_whitespace()
        match = _INT_PREFIX.match(self._buffer) or _NON_SPACE_RUN.match(self._buffer)
        self._buffer = self._buffer[match.end():]
        try:
            return int(match.group())
        except ValueError:
            return None

    def read_line(self) -> str:
        """Skip leading whitespace and return the rest of the current line."""
        self._skip_whitespace()
        line, _, rest = self._buffer.partition("\n")
        self._buffer = rest
        return line.rstrip("\r")


class _Session:
    def __init__(self, input_stream, output_stream):
        self.scanner = _Scanner(input_stream)
        self.write = output_stream.write
        self.journal = MoodJournal()
        self.factory = RecordFactory()
        self.handlers = {
            1: self.add_record,
            2: self.remove_record,
            3: self.search_by_mood,
            4: self.print_all,
            5: self.show_average,
            6: self.show_most_frequent,
            7: self.show_reasons,
        }

    def run(self) -> None:
        while True:
            self.write(MENU)
            option = self.scanner.read_int()
            self.write(SEPARATOR)
            if option == EXIT_OPTION:
                self.write("Saindo do programa...\n")
                return
            handler = self.handlers.get(option)
            if handler is not None:
                handler()

    def _read_record(self) -> MoodRecord:
        self.write("\nInforme o dia, mês e ano: (ex: 27 06 2025)\nReposta: ")
        day = self.scanner.read_int()
        month = self.scanner.read_int()
        year = self.scanner.read_int()
        date = validate_date(day, month, year)

        self.write("\nInforme seu Humor: ")
        self.write(MOOD_MENU)
        mood = parse_mood(self.scanner.read_int())

        self.write("\nInforme o motivo do seu humor: (Você tem até 100 caracteres!)\nResposta: ")
        reason = self.scanner.read_line()
        if len(reason) > MAX_REASON_LENGTH:
            raise InvalidRecordError(REASON_TOO_LONG)

        self.write("\nInforme a nota do seu dia (0 a 10)\nResposta: ")
        score = self.scanner.read_int()
        return self.factory.create(date, mood, reason, score)

    def _read_days(self, prompt: str) -> int:
        self.write(prompt)
        days = self.scanner.read_int()
        return 0 if days is None else days

    def _journal_is_empty(self, message: str) -> bool:
        if self.journal.is_empty():
            self.write(message)
            return True
        return False

    def add_record(self) -> None:
        try:
            record = self._read_record()
        except InvalidRecordError as error:
            self.write(f"{error}\n")
            self.write("Erro ao criar registro. Tente novamente.\n")
            return
        self.journal.append(record)
        self.write("\nRegistro adicionado com sucesso!\n")

    def remove_record(self) -> None:
        if self._journal_is_empty("A Lista está vazia!\n"):
            return
        self.write("Informe o ID do registro que deseja remover: ")
        record_id = self.scanner.read_int()
        try:
            self.journal.remove(record_id)
        except RecordNotFoundError:
            self.write("Elemento não encontrado!\n")
            return
        self.write("\nRegistro removido com sucesso!\n")

    def search_by_mood(self) -> None:
        if self._journal_is_empty("A Lista está vazia!\n"):
            return
        self.write("\nInforme o humor que deseja buscar:")
        self.write(MOOD_MENU)
        try:
            matches = self.journal.find_by_mood(parse_mood(self.scanner.read_int()))
        except InvalidRecordError as error:
            self.write(f"{error}\n")
            matches = []
        for record in matches:
            self.write(record.format())
        if not matches:
            self.write("Nenhum registro encontrado com esse humor!\n")

    def print_all(self) -> None:
        self.write("\nImprimindo todos os registros:\n")
        if self._journal_is_empty("A Lista está vazia!\n"):
            return
        for record in self.journal:
            self.write(record.format())

    def show_average(self) -> None:
        if self._journal_is_empty("A lista está vazia!\n"):
            return
        days = self._read_days("\nInforme quantos dias deseja calcular a média da nota do dia: ")
        try:
            average = self.journal.average_score(days)
        except ValueError as error:
            self.write(f"{error}\n")
            average = 0.0
        if average > 0:
            self.write(f"A média das notas dos últimos {days} dias é: {average:.2f}\n")
        else:
            self.write("Não há registros suficientes para calcular a média.\n")

    def show_most_frequent(self) -> None:
        if self._journal_is_empty("A lista está vazia!\n"):
            return
        days = self._read_days("\nInforme quantos dias deseja verificar o humor mais frequente: ")
        try:
            mood = self.journal.most_frequent_mood(days)
        except ValueError as error:
            self.write(f"{error}\n")
            self.write("Não há registros suficientes para calcular o humor mais frequente.\n")
            return
        self.write(f"O humor mais frequente nos últimos {days} dias é: {mood.label()}\n")

    def show_reasons(self) -> None:
        if self._journal_is_empty("A lista está vazia!\n"):
            return
        self.write("\nInforme o humor que deseja buscar os motivos: ")
        self.write(MOOD_MENU)
        try:
            mood = parse_mood(self.scanner.read_int())
        except InvalidRecordError:
            self.write("Humor inválido!\n")
            return
        reasons = self.journal.reasons_for(mood)
        for date, reason in reasons:
            self.write(f"Motivo do Humor no dia {date.format()}: {reason}\n")
        if not reasons:
            self.write("Nenhum registro com esse humor foi encontrado.\n")


def run_session(input_stream, output_stream) -> MoodJournal:
    """Run the menu until the exit option or end of input; return the journal."""
    session = _Session(input_stream, output_stream)
    try:
        session.run()
    except EOFError:
        pass
    return session.journal


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="humorlog", description="Diário de humor interativo.")
    parser.parse_args(argv)
    run_session(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())