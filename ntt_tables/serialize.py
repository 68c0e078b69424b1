"""Render tables as C constant arrays, 8 entries per line."""

from typing import Iterable, TextIO

from ntt_tables.table import Table

ENTRIES_PER_LINE = 8


def format_table(table: Table) -> str:
    """
    C source for one table:

        const int32_t <identifier>[<n>] = {
            <v0>, <v1>, ... (8 per line, width 5)
        };
    """
    lines = [f"\nconst int32_t {table.identifier}[{table.n}] = {{\n"]
    k = 0
    for v in table.values:
        if k == 0:
            lines.append("   ")
        lines.append(f" {int(v):5d},")
        k += 1
        if k == ENTRIES_PER_LINE:
            lines.append("\n")
            k = 0
    if k > 0:
        lines.append("\n")
    lines.append("};\n\n")
    return "".join(lines)


def write_table(stream: TextIO, table: Table) -> None:
    stream.write(format_table(table))


def write_tables(stream: TextIO, tables: Iterable[Table]) -> None:
    for table in tables:
        write_table(stream, table)
