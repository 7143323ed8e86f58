"""CLI 入口模块 - 交易指令解析命令行接口。"""

import json
import sys
from pathlib import Path

import click

from trade_intent import __version__
from trade_intent.config import get_settings
from trade_intent.types import NormalizedCommand
from trade_intent.utils.logging import get_logger, setup_logging
from trade_intent.validation import validate_command
from trade_intent.witai.errors import WitAIError
from trade_intent.witai.processor import WitAIProcessor
from trade_intent.witai.schemas import WitResponse
from trade_intent.witai.transformer import transform_response


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="显示版本号")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Trade Intent - 自然语言交易指令解析（英语 / 西班牙语）。"""
    if version:
        click.echo(f"trade-intent version {__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("text")
@click.option(
    "--timeout",
    "-t",
    type=float,
    default=None,
    help="本次调用超时（秒），默认使用配置值",
)
def parse(text: str, timeout: float | None) -> None:
    """通过 Wit.ai 解析一条交易指令并输出 JSON。"""
    setup_logging()
    logger = get_logger("trade_intent.main")
    settings = get_settings()

    missing = settings.validate_for_provider()
    if missing:
        logger.error(
            "missing_required_config",
            missing_keys=missing,
            hint="请在 .env 文件中配置 WIT_AI_TOKEN",
        )
        sys.exit(1)

    try:
        command = WitAIProcessor(settings).parse_command(text, timeout=timeout)
    except WitAIError as e:
        logger.error("parse_failed", error=str(e))
        sys.exit(1)

    _echo_command(command)


@cli.command()
@click.argument("response_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--text", default=None, help="原始输入文本，默认取响应中的 text 字段")
def transform(response_file: Path, text: str | None) -> None:
    """离线转换并校验已保存的 Wit.ai 响应 JSON。"""
    setup_logging()
    logger = get_logger("trade_intent.main")

    try:
        payload = json.loads(response_file.read_text(encoding="utf-8"))
        response = WitResponse.parse_payload(payload)
    except (ValueError, WitAIError) as e:
        logger.error("invalid_response_file", path=str(response_file), error=str(e))
        sys.exit(1)

    raw_input = text if text is not None else response.text
    _echo_command(validate_command(transform_response(response, raw_input)))


@cli.command()
def status() -> None:
    """显示配置摘要。"""
    settings = get_settings()

    click.echo("=" * 50)
    click.echo("Trade Intent - Status")
    click.echo("=" * 50)
    click.echo()

    # Wit.ai 配置状态
    click.echo("[Wit.ai]")
    token_status = "[OK] Configured" if settings.wit_ai_token else "[--] Not configured"
    click.echo(f"   Token: {token_status}")
    click.echo(f"   Base URL: {settings.wit_ai_base_url}")
    click.echo(f"   API version: {settings.wit_ai_api_version}")
    click.echo(f"   Timeout: {settings.wit_ai_timeout}s")
    click.echo(f"   Max attempts: {settings.wit_ai_max_attempts}")
    click.echo()

    # 日志配置
    click.echo("[Logging]")
    click.echo(f"   Log level: {settings.log_level}")
    click.echo(f"   Log format: {settings.log_format.value}")
    click.echo()

    missing = settings.validate_for_provider()
    if missing:
        click.echo("[ERROR] Configuration incomplete, missing:")
        for key in missing:
            click.echo(f"   - {key}")
    else:
        click.echo("[OK] Configuration complete")

    click.echo()
    click.echo("=" * 50)


def _echo_command(command: NormalizedCommand) -> None:
    click.echo(json.dumps(command.to_dict(), ensure_ascii=False, indent=2))


# 支持 python -m trade_intent.main 调用
if __name__ == "__main__":
    cli()
