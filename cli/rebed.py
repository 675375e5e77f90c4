'''rebed CLI 진입점(KR). rebed CLI entrypoint (EN).'''

from __future__ import annotations

import json
import logging
import sys
import zipfile
from pathlib import Path
from typing import Sequence

import click
import yaml

from core import RebedConfig, SourceConfig, configure_logging, materialize
from core.logging import utc_now
from embedfs import EmbeddedStore, VirtualEntry, join_virtual, walk

# failures reported as a CLI error instead of a traceback
SOURCE_ERRORS = (OSError, ValueError, ImportError, zipfile.BadZipFile)

logger = logging.getLogger(__name__)


def _store(ctx: click.Context) -> EmbeddedStore:
    '''컨텍스트의 소스 설정으로 저장소를 연다 · Open the store from context settings.'''

    config: RebedConfig = ctx.obj['config']
    return config.source.open_store()


def _run_policy(ctx: click.Context, policy: str, destination: Path) -> None:
    '''정책을 실행하고 요약을 출력 · Run a policy and echo a summary.'''

    try:
        materialize(policy, _store(ctx), destination)
    except SOURCE_ERRORS as exc:
        logger.error('materialization failed', extra={'policy': policy, 'error': str(exc)})
        raise click.ClickException(str(exc)) from exc
    click.echo(
        json.dumps(
            {'policy': policy, 'destination': str(destination), 'timestamp': utc_now()},
            ensure_ascii=False,
        )
    )


@click.group()
@click.option(
    '--config-file',
    type=click.Path(path_type=Path),
    default=None,
    help='구성 파일 경로 · Config file path',
)
@click.option('--verbose', is_flag=True, help='상세 로그 · Verbose logs')
@click.option('--quiet', is_flag=True, help='간략 로그 · Quiet logs')
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='로그 파일 경로 · Log file path',
)
@click.option('--source', type=str, default=None, help='임베디드 소스 위치 · Embedded source location')
@click.option(
    '--kind',
    type=click.Choice(['directory', 'zip', 'package']),
    default=None,
    help='소스 종류 · Source kind',
)
@click.option('--subdir', type=str, default=None, help='소스 하위 경로 · Source sub-path')
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
    source: str | None,
    kind: str | None,
    subdir: str | None,
) -> None:
    '''임베디드 트리 구체화 CLI · Embedded tree materialization CLI.'''

    try:
        config = RebedConfig.from_file(config_file) if config_file else RebedConfig()
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise click.ClickException(f'invalid config {config_file}: {exc}') from exc
    level = config.log_level
    if verbose:
        level = 'DEBUG'
    if quiet:
        level = 'WARNING'
    configure_logging(log_file or config.log_file, level=level)
    overrides = {
        key: value
        for key, value in (('location', source), ('kind', kind), ('subdir', subdir))
        if value is not None
    }
    if overrides:
        config.source = SourceConfig.model_validate({**config.source.model_dump(), **overrides})
    ctx.obj = {'config': config}


@cli.command()
@click.argument('destination', type=click.Path(path_type=Path))
@click.pass_context
def tree(ctx: click.Context, destination: Path) -> None:
    '''디렉터리 구조만 만든다 · Create the folder structure only.'''

    _run_policy(ctx, 'tree', destination)


@cli.command()
@click.argument('destination', type=click.Path(path_type=Path))
@click.pass_context
def touch(ctx: click.Context, destination: Path) -> None:
    '''빈 파일을 만든다 · Create folders and empty files.'''

    _run_policy(ctx, 'touch', destination)


@cli.command()
@click.argument('destination', type=click.Path(path_type=Path))
@click.pass_context
def write(ctx: click.Context, destination: Path) -> None:
    '''모든 파일을 덮어쓴다 · Overwrite every file.'''

    _run_policy(ctx, 'write', destination)


@cli.command()
@click.argument('destination', type=click.Path(path_type=Path))
@click.pass_context
def patch(ctx: click.Context, destination: Path) -> None:
    '''누락된 파일만 만든다 · Create missing files only.'''

    _run_policy(ctx, 'patch', destination)


@cli.command()
@click.argument('destination', type=click.Path(path_type=Path))
@click.pass_context
def create(ctx: click.Context, destination: Path) -> None:
    '''충돌이 없을 때만 만든다 · Create when no file conflicts.'''

    _run_policy(ctx, 'create', destination)


@cli.command()
@click.pass_context
def apply(ctx: click.Context) -> None:
    '''설정 파일의 정책을 실행 · Run the policy named in the config file.'''

    config: RebedConfig = ctx.obj['config']
    _run_policy(ctx, config.policy, config.destination)


@cli.command(name='ls')
@click.argument('start', type=str, default='.')
@click.pass_context
def list_entries(ctx: click.Context, start: str) -> None:
    '''임베디드 항목을 나열 · List embedded entries breadth-first.'''

    def emit(dirpath: str, entry: VirtualEntry) -> None:
        click.echo(
            json.dumps(
                {'path': join_virtual(dirpath, entry.name), 'kind': entry.kind},
                ensure_ascii=False,
            )
        )

    try:
        walk(_store(ctx), start, emit)
    except SOURCE_ERRORS as exc:
        raise click.ClickException(str(exc)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    '''CLI 진입점을 실행한다 · Execute CLI entry point.'''

    argv = sys.argv[1:] if argv is None else argv
    try:
        cli.main(args=list(argv), prog_name='rebed', standalone_mode=False)
    except click.ClickException as exc:
        click.echo(json.dumps({'error': exc.format_message()}, ensure_ascii=False), err=True)
        return 1
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
