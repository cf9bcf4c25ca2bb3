"""
Scraper settings and configuration constants.

All URLs and the lookback window are fixed; the settings instance is
created once at import time and never mutated.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScraperSettings:
    """Configuration settings for the Tea Tree Gully scraper."""

    # Portal URLs
    main_url: str = (
        "https://www.ecouncil.teatreegully.sa.gov.au/eservice/dialog/"
        "daEnquiryInit.do?nodeNum=131612"
    )
    # {0} and {1} are replaced with the encoded DD/MM/YYYY range bounds
    search_url_template: str = (
        "https://www.ecouncil.teatreegully.sa.gov.au/eservice/dialog/"
        "daEnquiry.do?number=&lodgeRangeType=on&dateFrom={0}&dateTo={1}"
        "&detDateFromString=&detDateToString=&streetName=&suburb=0&unitNum="
        "&houseNum=0%0D%0A%09%09%09%09%09&searchMode=A&submitButton=Search"
    )
    comment_url: str = "mailto:customerservice@cttg.sa.gov.au"

    # Storage
    database_path: str = "data.sqlite"

    # Search window
    lookback_months: int = 1

    # Transport
    request_timeout: int = 300
    user_agent: str = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"


# Default settings instance
DEFAULT_SETTINGS = ScraperSettings()
