"""
core/data/ip_ranges/models.py - IP 대역 카탈로그 데이터 구조

- PrefixRecord: 공개된 주소 블록 하나 (network, region, service)
- Catalog: 문서 순서를 유지하는 불변 PrefixRecord 시퀀스
- ServicesResult: 단일 조회의 리전/서비스 결과
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

# =============================================================================
# Data Structures
# =============================================================================


@dataclass(frozen=True)
class PrefixRecord:
    """공개된 AWS prefix"""

    network: str  # CIDR (예: "3.5.140.0/22" 또는 "2600:1f14::/35")
    region: str
    service: str
    network_border_group: str = ""


@dataclass(frozen=True)
class Catalog:
    """파싱된 ip-ranges 문서

    레코드는 문서 순서를 유지합니다 (IPv4 ``prefixes`` 다음 ``ipv6_prefixes``).
    한 블록이 여러 서비스에 속할 수 있으므로 중복 네트워크도 유지합니다.
    """

    records: tuple[PrefixRecord, ...] = ()
    sync_token: str = ""
    create_date: str = ""

    def __iter__(self) -> Iterator[PrefixRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    def regions(self) -> list[str]:
        """고유 리전 목록"""
        return sorted({r.region for r in self.records if r.region})

    def services(self) -> list[str]:
        """고유 서비스 목록"""
        return sorted({r.service for r in self.records if r.service})

    def filter(self, region: str | None = None, service: str | None = None) -> Catalog:
        """
        리전/서비스로 레코드 필터링

        Args:
            region: 리전 필터 (대소문자 무시, 부분 일치)
            service: 서비스 필터 (대소문자 무시, 부분 일치)

        Returns:
            매칭된 레코드로 만든 새 Catalog (순서 유지)
        """
        records = []
        for record in self.records:
            if region and region.lower() not in record.region.lower():
                continue
            if service and service.lower() not in record.service.lower():
                continue
            records.append(record)

        return Catalog(records=tuple(records), sync_token=self.sync_token, create_date=self.create_date)


@dataclass
class ServicesResult:
    """주소 또는 네트워크의 서비스 조회 결과

    빈 결과 (리전, 서비스 없음)는 AWS 주소가 아님을 뜻합니다.
    """

    region: str = ""
    services: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.services)
