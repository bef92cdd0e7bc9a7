"""
입찰 목록 데이터 모델

카운티 구매 페이지에서 추출한 입찰 항목과 첨부파일 정보를 구조화합니다.
두 모델 모두 한 번의 추출 과정에서 생성되어 호출자에게 전달되며 저장되지 않습니다.
"""

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from etowah_bids.exceptions import ParsingException


FY_PREFIX = "FY "


class Attachment(BaseModel):
    """입찰 첨부파일"""

    filename: str = Field(..., description="파일명 (URL의 마지막 경로 조각)")
    suggested_filename: Optional[str] = Field(default=None, description="저장 시 제안 파일명")
    key: Optional[str] = Field(default=None, description="저장소 키 (이 사이트에서는 미사용)")

    def signature(self) -> str:
        """중복 판별용 서명 ("filename:suggested_filename")"""
        return f"{self.filename}:{self.suggested_filename or ''}"

    def to_dict(self) -> dict[str, Any]:
        """JSON 출력용 딕셔너리 (설정되지 않은 key는 제외)"""
        data = self.model_dump()
        if data["key"] is None:
            data.pop("key")
        return data


class BidItem(BaseModel):
    """
    입찰 목록 항목 모델

    signal_source_unique_id는 항상 "FY "로 시작하는 정규화된 입찰번호이며,
    이 번호를 도출하지 못한 항목은 애초에 생성되지 않습니다.
    """

    title: str = Field(..., description="표시 제목 ('Read More' 제거)")
    signal_source_unique_id: str = Field(..., description="정규화된 회계연도 입찰번호")
    due_date: Optional[str] = Field(default=None, description="마감일 (이 사이트에서는 항상 None)")
    details_url_for_item: Optional[str] = Field(default=None, description="상세 페이지 URL")
    attachments: List[Attachment] = Field(default_factory=list, description="첨부파일 목록")
    source_url: Optional[str] = Field(default=None, description="출처 URL (미사용)")

    @field_validator("signal_source_unique_id")
    @classmethod
    def require_fy_prefix(cls, v: str) -> str:
        """입찰번호는 'FY ' 접두어를 가져야 함"""
        if not v.startswith(FY_PREFIX):
            raise ParsingException(
                f"Bid identifier must start with '{FY_PREFIX}': {v}",
                raw_value=v,
                expected_format="FY YYYY-NN",
            )
        return v

    # === Domain Behaviors ===

    def has_details_url(self) -> bool:
        """상세 페이지 후속 작업 대상 여부"""
        return bool(self.details_url_for_item)

    def attachments_key(self) -> str:
        """
        첨부파일 서명을 한 줄로 평탄화

        Returns:
            "a.pdf:a.pdf|b.pdf:b.pdf" 형태의 문자열 (첨부 없음이면 빈 문자열)
        """
        return "|".join(att.signature() for att in self.attachments)

    def dedup_key(self) -> Tuple[str, str, Optional[str], Optional[str], str]:
        """
        중복 제거용 복합 키

        제목, 입찰번호, 마감일, 상세 URL, 첨부파일 서명으로 구성됩니다.
        """
        return (
            self.title,
            self.signal_source_unique_id,
            self.due_date,
            self.details_url_for_item,
            self.attachments_key(),
        )

    def to_dict(self) -> dict[str, Any]:
        """
        JSON 출력용 딕셔너리

        due_date와 details_url_for_item은 None이어도 null로 남기고,
        사용하지 않는 source_url은 값이 없으면 제외합니다.
        """
        data = self.model_dump(exclude={"attachments"})
        if data["source_url"] is None:
            data.pop("source_url")
        data["attachments"] = [att.to_dict() for att in self.attachments]
        return data
