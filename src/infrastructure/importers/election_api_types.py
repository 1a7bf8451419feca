"""選挙結果APIのレスポンス型定義.

master-data.json（マスタ）とresult.json（開票結果）の必要な部分だけを
定義し、それ以外のフィールドは無視する。
"""

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ApiRegion(_ApiModel):
    """地方."""

    id: int
    name: str


class ApiProvince(_ApiModel):
    """県."""

    id: int
    name: str
    region_id: int = Field(alias="regionId")


class ApiElectionArea(_ApiModel):
    """選挙区."""

    id: int
    name: str
    area_no: int = Field(alias="areaNo")
    province_id: int = Field(alias="provinceId")


class ApiParty(_ApiModel):
    """政党."""

    id: int
    name: str
    color: str | None = None


class ApiCandidate(_ApiModel):
    """小選挙区の候補者."""

    id: int
    full_name: str = Field(alias="fullName")
    party_id: int = Field(alias="partyId")
    election_area_id: int = Field(alias="electionAreaId")
    no: int | None = None


class MasterData(_ApiModel):
    """master-data.json."""

    regions: dict[str, ApiRegion] = Field(default_factory=dict)
    provinces: list[ApiProvince] = Field(default_factory=list)
    election_areas: list[ApiElectionArea] = Field(
        default_factory=list, alias="electionAreas"
    )
    parties: dict[str, ApiParty] = Field(default_factory=dict)
    candidates: list[ApiCandidate] = Field(default_factory=list)


class ApiCandidateScore(_ApiModel):
    """候補者の得票."""

    id: int
    total_votes: int = Field(default=0, alias="totalVotes")


class ApiAreaBallotScore(_ApiModel):
    """選挙区ごとの得票."""

    candidates: list[ApiCandidateScore] = Field(default_factory=list)


class ApiPartyScore(_ApiModel):
    """政党の獲得議席（公表値）."""

    id: int | None = None
    area_seats: int = Field(default=0, alias="areaSeats")
    party_list_seats: int = Field(default=0, alias="partyListSeats")
    total_votes: int | None = Field(default=None, alias="totalVotes")


class ApiElectionScore(_ApiModel):
    """投票数・投票率. キー0は全国."""

    total_votes: int = Field(default=0, alias="totalVotes")
    percent_voter: float = Field(default=0.0, alias="percentVoter")


class ResultData(_ApiModel):
    """result.json."""

    area_ballot_scores: list[ApiAreaBallotScore] = Field(
        default_factory=list, alias="areaBallotScores"
    )
    party_scores: dict[str, ApiPartyScore] = Field(
        default_factory=dict, alias="partyScores"
    )
    election_scores: dict[str, ApiElectionScore] = Field(
        default_factory=dict, alias="electionScores"
    )
