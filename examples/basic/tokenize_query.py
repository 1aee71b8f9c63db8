"""Scan one query with the pull API and report where scanning failed."""

from sqlscan import ScanOutcome, create, pull

session = create("example", "select * from `table` where `a` = xyz")
while True:
    token, outcome = pull(session)
    print(f"{token.type.name:<8} {token}")
    if outcome is ScanOutcome.LEXICAL_ERROR:
        print("scan failed at", token.location)
    if outcome.is_terminal:
        break
