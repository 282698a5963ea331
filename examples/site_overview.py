#!/usr/bin/env python3
import asyncio
import os

from dotenv import load_dotenv

from matomo_client import ReportingClient

load_dotenv()


async def main() -> None:
    """Fetch a one-day overview of a site in a single bulk request."""
    client = ReportingClient(
        url=os.getenv(key="MATOMO_URL", default="https://demo.matomo.cloud"),
        token_auth=os.getenv(key="MATOMO_AUTH_TOKEN"),
        id_site=int(os.getenv(key="MATOMO_DEFAULT_SITE_ID", default="1")),
    )
    batch = client.prepare_requests()
    summary = await batch.visits_summary.get(period="day", date="yesterday")
    countries = await batch.user_country.get_country(period="day", date="yesterday", filter_limit=5)
    browsers = await batch.devices_detection.get_browsers(period="day", date="yesterday", filter_limit=5)
    await batch.send()

    print(f"visits: {summary.result.get('nb_visits', 0)}")
    for row in countries.result:
        print(f"country {row['label']}: {row['nb_visits']}")
    for row in browsers.result:
        print(f"browser {row['label']}: {row['nb_visits']}")


if __name__ == "__main__":
    asyncio.run(main())
