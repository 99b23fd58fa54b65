"""
cli/app.py - 메인 CLI 엔트리포인트

prefix 카탈로그와 포함 판정 엔진 위의 Click 기반 CLI입니다.

명령어 구조:
    aws-ranges check-ip <address|cidr>        # AWS 주소인지 확인
    aws-ranges check-services <address|cidr>  # 소유 서비스/리전 조회
    aws-ranges ranges [--region R] [--service S]
    aws-ranges filters                        # 사용 가능한 리전/서비스
    aws-ranges cache status|clear|refresh

전역 옵션:
    --cache-file PATH   캐시 파일 (기본: ~/.aws-ranges.json)
    --no-cache          기존 캐시를 무시하고 다시 다운로드
    --timeout SECONDS   HTTP 읽기 타임아웃 (기본: AWS_RANGES_READ_TIMEOUT 또는 90)
    -v, --verbose       디버그 로깅

Usage:
    $ aws-ranges check-ip 3.5.140.1
    $ aws-ranges check-services 13.32.0.0/15 --json
    $ python -m cli.app --help
"""

from __future__ import annotations

import functools
import json
from collections.abc import Callable
from typing import Any

import click
from click import Context

from cli.ui.console import get_log_handler, print_error, print_info, print_success, print_table, print_warning
from core.config import HttpClientConfig, LogConfig, get_version, settings
from core.data.ip_ranges import (
    Catalog,
    clear_cache,
    contains,
    get_cache_status,
    load_catalog,
    lookup_services,
)
from core.exceptions import RangesError, format_error_for_user
from core.tools.cache import get_cache_path


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """RangesError를 stderr에 출력하고 종료 코드 1로 종료"""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except RangesError as e:
            print_error(format_error_for_user(e))
            raise SystemExit(1) from e

    return wrapper


def _load(ctx: Context, use_cache: bool | None = None) -> Catalog:
    """컨텍스트에 저장된 그룹 옵션으로 카탈로그 로드"""
    opts = ctx.obj
    return load_catalog(
        opts["cache_file"],
        url=opts["url"],
        use_cache=opts["use_cache"] if use_cache is None else use_cache,
        http_config=opts["http_config"],
    )


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))


@click.group()
@click.version_option(get_version(), prog_name="aws-ranges")
@click.option(
    "--cache-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="캐시 파일 경로 (기본: ~/.aws-ranges.json)",
)
@click.option("--no-cache", is_flag=True, help="기존 캐시를 무시하고 다시 다운로드")
@click.option("--url", default=settings.AWS_RANGES_URL, show_default=True, help="ip-ranges 문서 URL")
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="HTTP 읽기 타임아웃 (초, 기본: AWS_RANGES_READ_TIMEOUT 또는 90)",
)
@click.option("-v", "--verbose", is_flag=True, help="디버그 로깅")
@click.pass_context
def cli(
    ctx: Context,
    cache_file: str | None,
    no_cache: bool,
    url: str,
    timeout: float | None,
    verbose: bool,
) -> None:
    """aws-ranges - 공개된 AWS IP 대역으로 주소 확인"""
    LogConfig.from_env().apply(verbose=verbose, handler=get_log_handler())

    ctx.ensure_object(dict)
    ctx.obj.update(
        {
            "cache_file": cache_file or get_cache_path(),
            "use_cache": not no_cache,
            "url": url,
            "http_config": HttpClientConfig.from_env(read_timeout=timeout),
        }
    )


# =============================================================================
# Query commands
# =============================================================================


@cli.command("check-ip")
@click.argument("query")
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
@click.pass_context
@handle_errors
def check_ip(ctx: Context, query: str, as_json: bool) -> None:
    """IP 주소 또는 네트워크가 AWS 소유인지 확인

    \b
    Examples:
        aws-ranges check-ip 3.5.140.1
        aws-ranges check-ip 13.32.0.0/16
    """
    catalog = _load(ctx)
    is_aws = contains(catalog, query)

    if as_json:
        _echo_json({"query": query, "aws": is_aws})
    elif is_aws:
        click.echo(f"{query} belongs to AWS")
    else:
        click.echo(f"{query} does not belong to AWS")


@cli.command("check-services")
@click.argument("query")
@click.option("--strict-region", is_flag=True, help="매칭 결과의 리전이 서로 다르면 실패")
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
@click.pass_context
@handle_errors
def check_services(ctx: Context, query: str, strict_region: bool, as_json: bool) -> None:
    """IP 주소 또는 네트워크가 속한 AWS 서비스 조회

    CIDR 조회는 prefix 길이가 같은 블록에만 매칭됩니다.
    """
    catalog = _load(ctx)
    result = lookup_services(catalog, query, strict_region=strict_region)

    if as_json:
        _echo_json({"query": query, "region": result.region, "services": result.services})
    elif not result:
        click.echo(f"{query} does not belong to any AWS service")
    else:
        services = ", ".join(result.services)
        click.echo(f"{query} belongs to the service {services} in the {result.region} region")


@cli.command("ranges")
@click.option("-r", "--region", default=None, help="리전 필터 (부분 일치)")
@click.option("-s", "--service", default=None, help="서비스 필터 (부분 일치)")
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
@click.pass_context
@handle_errors
def ranges_command(ctx: Context, region: str | None, service: str | None, as_json: bool) -> None:
    """공개된 prefix 목록 (필터 선택)

    \b
    Examples:
        aws-ranges ranges -s S3 -r ap-northeast-2
        aws-ranges ranges -s CLOUDFRONT --json
    """
    catalog = _load(ctx).filter(region=region, service=service)

    if as_json:
        _echo_json(
            [
                {
                    "ip_prefix": r.network,
                    "region": r.region,
                    "service": r.service,
                    "network_border_group": r.network_border_group,
                }
                for r in catalog
            ]
        )
        return

    if not catalog:
        print_warning("No matching prefixes")
        return

    print_table(
        f"AWS IP ranges ({len(catalog)})",
        ["Prefix", "Region", "Service", "Border group"],
        [[r.network, r.region, r.service, r.network_border_group] for r in catalog],
    )


@cli.command("filters")
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
@click.pass_context
@handle_errors
def filters_command(ctx: Context, as_json: bool) -> None:
    """사용 가능한 리전 및 서비스 목록"""
    catalog = _load(ctx)
    regions = catalog.regions()
    services = catalog.services()

    if as_json:
        _echo_json({"regions": regions, "services": services})
        return

    click.echo(f"Regions ({len(regions)}): {', '.join(regions)}")
    click.echo(f"Services ({len(services)}): {', '.join(services)}")


# =============================================================================
# Cache commands
# =============================================================================


@cli.group("cache")
def cache_cmd() -> None:
    """로컬 ip-ranges 캐시 파일 관리"""


@cache_cmd.command("status")
@click.pass_context
@handle_errors
def cache_status(ctx: Context) -> None:
    """캐시 파일 상태 확인"""
    status = get_cache_status(ctx.obj["cache_file"])

    if not status.exists:
        print_info(f"No cache file at {status.path}")
        return

    modified = status.modified.strftime("%Y-%m-%d %H:%M") if status.modified else "-"
    click.echo(f"Path:      {status.path}")
    click.echo(f"Modified:  {modified}")
    click.echo(f"Size:      {status.size_bytes} bytes")
    click.echo(f"Prefixes:  {status.prefix_count}")
    click.echo(f"SyncToken: {status.sync_token or '-'}")


@cache_cmd.command("clear")
@click.pass_context
@handle_errors
def cache_clear(ctx: Context) -> None:
    """캐시 파일 삭제"""
    path = ctx.obj["cache_file"]
    if clear_cache(path):
        print_success(f"Removed {path}")
    else:
        print_info(f"No cache file at {path}")


@cache_cmd.command("refresh")
@click.pass_context
@handle_errors
def cache_refresh(ctx: Context) -> None:
    """문서를 다시 받아 캐시 파일 덮어쓰기"""
    catalog = _load(ctx, use_cache=False)
    print_success(f"Cached {len(catalog)} prefixes to {ctx.obj['cache_file']}")


def main() -> None:
    """console_scripts 엔트리포인트"""
    cli(obj={})


if __name__ == "__main__":
    main()
