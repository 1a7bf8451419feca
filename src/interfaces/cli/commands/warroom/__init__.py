"""選挙分析（War Room）CLI コマンドグループ."""

import click

from src.common.logging import setup_logging
from src.infrastructure.config.settings import get_settings
from src.interfaces.cli.commands.warroom.areas import provinces, regions
from src.interfaces.cli.commands.warroom.candidate import candidate
from src.interfaces.cli.commands.warroom.export import get_export_commands
from src.interfaces.cli.commands.warroom.overview import overview
from src.interfaces.cli.commands.warroom.party import party
from src.interfaces.cli.commands.warroom.search import search
from src.interfaces.cli.commands.warroom.seats import seats
from src.interfaces.cli.commands.warroom.simulate import simulate
from src.interfaces.cli.commands.warroom.trends import trends


@click.group()
@click.option("--log-level", default=None, help="ログレベル（省略時は設定値）")
@click.option("--json-logs", is_flag=True, default=False, help="ログをJSONで出力する")
def warroom(log_level: str | None, json_logs: bool):
    """タイ総選挙の分析コマンド."""
    settings = get_settings()
    setup_logging(
        level=log_level or settings.log_level,
        json_logs=json_logs or settings.log_json,
    )


warroom.add_command(overview)
warroom.add_command(seats)
warroom.add_command(provinces)
warroom.add_command(regions)
warroom.add_command(party)
warroom.add_command(candidate)
warroom.add_command(search)
warroom.add_command(simulate)
warroom.add_command(trends)
for command in get_export_commands():
    warroom.add_command(command)
