from pydantic import BaseModel, Field


class PrizeTierView(BaseModel):
    hit_count: int
    label: str
    winner_count: int
    prize_amount: str
    has_winners: bool


class ResultView(BaseModel):
    contest_number: int | None = None
    draw_date: str = ""
    status: str
    is_rolled_over: bool
    draw_location_name: str | None = None
    draw_location_region: str | None = None
    winning_numbers: list[int] = Field(default_factory=list)
    next_contest_number: int | None = None
    next_contest_date: str = ""
    next_contest_estimated_prize: str = ""
    next_contest_accumulated_prize: str = ""
    zero_five_contest_number: int | None = None
    zero_five_accumulated_prize: str = ""
    special_accumulated_prize: str = ""
    total_collected: str = ""
    prize_tiers: list[PrizeTierView] = Field(default_factory=list)
    search_url: str


class ErrorDetail(BaseModel):
    detail: str
