"""
记法 CLI

命令：
- inspect: 解析并展示字段
- validate: 批量校验
- dump: 字段序列化为 PNN 字符串
- flip: 交换阵营

## 使用示例

```bash
python -m notation.cli inspect piece "+R'"
python -m notation.cli inspect style CHESS960 --json
python -m notation.cli validate name KING +queen King
python -m notation.cli dump k --prefix + --suffix "'"
python -m notation.cli flip style chess
```
"""

from __future__ import annotations

from enum import Enum

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from notation.errors import NotationError
from notation.logging import DEFAULT_LOG_LEVEL, logger, setup_logging
from notation.models import (
    FieldsInfo,
    PieceInfo,
    PieceNameInfo,
    StyleInfo,
    StyleNameInfo,
    ValidationResult,
)
from notation.pnn import Piece, PieceName, dump as dump_fields, parse_fields, valid_fields
from notation.snn import Style, StyleName

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="Piece / style notation tools (PNN / SNN)")


class Kind(str, Enum):
    """记法种类"""

    PIECE = "piece"
    NAME = "name"
    FIELDS = "fields"
    STYLE = "style"
    STYLE_NAME = "style-name"


VALIDATORS = {
    Kind.PIECE: Piece.valid,
    Kind.NAME: PieceName.valid,
    Kind.FIELDS: valid_fields,
    Kind.STYLE: Style.valid,
    Kind.STYLE_NAME: StyleName.valid,
}


def _describe(kind: Kind, value: str) -> PieceInfo | PieceNameInfo | FieldsInfo | StyleInfo | StyleNameInfo:
    """按种类解析，格式错误时抛出 InvalidFormat"""
    if kind == Kind.PIECE:
        return PieceInfo.from_piece(Piece.parse(value))
    if kind == Kind.NAME:
        return PieceNameInfo.from_name(PieceName.parse(value))
    if kind == Kind.FIELDS:
        return FieldsInfo.from_fields(value, parse_fields(value))
    if kind == Kind.STYLE:
        return StyleInfo.from_style(Style.parse(value))
    return StyleNameInfo.from_name(StyleName.parse(value))


def _fail(error: NotationError) -> typer.Exit:
    err_console.print(f"Error: {error}", style="red", markup=False)
    return typer.Exit(1)


@app.callback()
def main(
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL, "--log-level", envvar="NOTATION_LOG_LEVEL", help="日志级别"
    ),
    log_file: str | None = typer.Option(
        None, "--log-file", envvar="NOTATION_LOG_FILE", help="日志文件路径"
    ),
) -> None:
    """配置日志"""
    setup_logging(log_level, log_file)


@app.command()
def inspect(
    kind: Kind = typer.Argument(..., help="记法种类"),
    value: str = typer.Argument(..., help="记法字符串"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """解析记法字符串并展示各字段"""
    try:
        info = _describe(kind, value)
    except NotationError as e:
        raise _fail(e) from None

    if output_json:
        print(info.model_dump_json(indent=2))
        return

    table = Table(title=f"{kind.value}: {value}")
    table.add_column("Field")
    table.add_column("Value")
    for field_name, field_value in info.model_dump(mode="json").items():
        table.add_row(field_name, repr(field_value) if isinstance(field_value, str) else str(field_value))
    console.print(table)


@app.command()
def validate(
    kind: Kind = typer.Argument(..., help="记法种类"),
    values: list[str] = typer.Argument(..., help="待校验的字符串"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """批量校验，任一不合法时退出码为 1"""
    check = VALIDATORS[kind]
    results = [ValidationResult(kind=kind.value, value=v, valid=check(v)) for v in values]

    for result in results:
        if output_json:
            print(result.model_dump_json())
        elif result.valid:
            console.print(f"[green]valid[/green]   {escape(result.value)}", highlight=False)
        else:
            console.print(f"[red]invalid[/red] {escape(result.value)}", highlight=False)

    invalid = [r.value for r in results if not r.valid]
    if invalid:
        logger.info(f"{len(invalid)}/{len(results)} {kind.value} values rejected")
        raise typer.Exit(1)


@app.command()
def dump(
    letter: str = typer.Argument(..., help="单个 ASCII 字母"),
    prefix: str | None = typer.Option(None, "--prefix", "-p", help="前缀 (+/-)"),
    suffix: str | None = typer.Option(None, "--suffix", "-s", help="后缀 (')"),
) -> None:
    """字段序列化为 PNN 字符串"""
    try:
        print(dump_fields(letter=letter, prefix=prefix, suffix=suffix))
    except NotationError as e:
        raise _fail(e) from None


@app.command()
def flip(
    kind: Kind = typer.Argument(..., help="记法种类（piece 或 style）"),
    value: str = typer.Argument(..., help="记法字符串"),
) -> None:
    """交换阵营"""
    try:
        if kind == Kind.PIECE:
            print(Piece.parse(value).flip())
        elif kind == Kind.STYLE:
            print(Style.parse(value).flip())
        else:
            err_console.print(f"Error: cannot flip {kind.value}", style="red", markup=False)
            raise typer.Exit(2)
    except NotationError as e:
        raise _fail(e) from None


if __name__ == "__main__":
    app()
