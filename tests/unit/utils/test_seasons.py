from datetime import datetime

import pytest

from nursery.enums.growth import Season
from nursery.utils.seasons import current_season, season_for_month


class TestSeasonForMonth:
    @pytest.mark.parametrize(
        "month, expected",
        [
            (1, Season.SUMMER),
            (3, Season.AUTUMN),
            (5, Season.AUTUMN),
            (6, Season.WINTER),
            (8, Season.WINTER),
            (9, Season.SPRING),
            (11, Season.SPRING),
            (12, Season.SUMMER),
        ],
    )
    def test_mapping(self, month, expected):
        assert season_for_month(month) == expected

    @pytest.mark.parametrize("month", [0, 13])
    def test_out_of_range(self, month):
        with pytest.raises(ValueError):
            season_for_month(month)

    def test_current_season_uses_given_time(self):
        assert current_season(datetime(2024, 7, 15)) == Season.WINTER
