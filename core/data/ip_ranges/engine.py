"""
core/data/ip_ranges/engine.py - 포함 판정 엔진

Catalog 대상 소유 여부 및 서비스 조회. 모든 함수는 문서 순서대로
카탈로그를 선형 탐색하며 카탈로그를 변경하지 않습니다.

- contains_address: 공개된 블록 안의 호스트 주소인지
- contains_network: 그대로 공개됐거나 공개 블록에 완전히 포함되는 CIDR인지
- lookup_services: 조회값을 소유한 모든 레코드의 서비스/리전
"""

from __future__ import annotations

import ipaddress
import logging

from core.exceptions import InconsistentDataError, ParseError

from .models import Catalog, ServicesResult

logger = logging.getLogger(__name__)

# 네트워크 타입 별칭
IPNetwork = ipaddress.IPv4Network | ipaddress.IPv6Network
IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

# =============================================================================
# Parsing helpers
# =============================================================================


def is_cidr(query: str) -> bool:
    """CIDR 표기 여부"""
    return "/" in query


def parse_address(address: str) -> IPAddress:
    """호스트 주소 파싱 (실패 시 ParseError)"""
    try:
        return ipaddress.ip_address(address.strip())
    except ValueError as e:
        raise ParseError("query", f"invalid IP address {address!r}", value=address, cause=e) from e


def parse_network(cidr: str, stage: str = "query") -> IPNetwork:
    """CIDR 파싱, 호스트 비트 허용 (실패 시 ParseError)"""
    try:
        return ipaddress.ip_network(cidr.strip(), strict=False)
    except ValueError as e:
        raise ParseError(stage, f"invalid CIDR {cidr!r}", value=cidr, cause=e) from e


def _try_network(cidr: str) -> IPNetwork | None:
    try:
        return ipaddress.ip_network(cidr, strict=False)
    except ValueError:
        logger.debug("Skipping malformed catalog prefix %r", cidr)
        return None


# =============================================================================
# Membership
# =============================================================================


def contains_address(catalog: Catalog, address: str) -> bool:
    """
    호스트 주소가 공개된 블록에 속하는지 확인

    잘못된 카탈로그 레코드는 건너뜁니다.

    Raises:
        ParseError: 조회 주소 형식 오류
    """
    ip_obj = parse_address(address)

    for record in catalog:
        network = _try_network(record.network)
        if network is not None and ip_obj in network:
            return True

    return False


def contains_network(catalog: Catalog, cidr: str) -> bool:
    """
    네트워크가 공개됐거나 공개된 블록에 포함되는지 확인

    레코드의 prefix 문자열이 ``cidr``와 같거나 레코드 네트워크가 조회
    네트워크 전체를 포함하면 매칭됩니다. 조회 네트워크의 시작 주소만
    포함하는 것으로는 부족합니다: /15 레코드에 대해 13.32.0.0/14 조회는
    시작 주소가 블록 안에 있어도 False입니다. 잘못된 카탈로그 레코드는
    건너뜁니다.

    Raises:
        ParseError: 조회 CIDR 형식 오류
    """
    cidr = cidr.strip()
    query = parse_network(cidr)

    for record in catalog:
        if record.network == cidr:
            return True

        network = _try_network(record.network)
        if network is None or network.version != query.version:
            continue
        if query.subnet_of(network):  # type: ignore[arg-type]
            return True

    return False


def contains(catalog: Catalog, query: str) -> bool:
    """CIDR이면 contains_network, 아니면 contains_address"""
    if is_cidr(query):
        return contains_network(catalog, query)
    return contains_address(catalog, query)


# =============================================================================
# Attribution
# =============================================================================


def lookup_services(catalog: Catalog, query: str, strict_region: bool = False) -> ServicesResult:
    """
    주소 또는 네트워크를 소유한 서비스와 리전 조회

    CIDR 조회는 prefix 길이가 같고 조회의 시작 주소를 포함하는 레코드에만
    매칭됩니다. 카탈로그 전체를 탐색하며, 리전은 마지막 매칭 레코드의 값입니다.

    Args:
        catalog: prefix 카탈로그
        query: 호스트 주소 또는 CIDR
        strict_region: 매칭 결과의 리전이 다르면 예외 발생

    Returns:
        ServicesResult (매칭 없으면 빈 결과)

    Raises:
        ParseError: 조회값 또는 카탈로그 레코드 형식 오류
        InconsistentDataError: strict_region이고 둘 이상의 리전이 매칭됨
    """
    query_network: IPNetwork | None = None
    if is_cidr(query):
        query_network = parse_network(query)
        ip_obj: IPAddress = query_network.network_address
    else:
        ip_obj = parse_address(query)

    result = ServicesResult()
    regions: list[str] = []

    for record in catalog:
        network = parse_network(record.network, stage="record")

        if query_network is not None and network.prefixlen != query_network.prefixlen:
            continue
        if ip_obj not in network:
            continue

        result.region = record.region
        if record.region not in regions:
            regions.append(record.region)
        if record.service not in result.services:
            result.services.append(record.service)

    if strict_region and len(regions) > 1:
        raise InconsistentDataError(query, regions)

    logger.debug("%s matched %d service(s) in %s", query, len(result.services), regions or "no region")
    return result
