"""Basic usage examples for restquery."""

from restquery import Filter, Meta, Query, build_path, normalize, to_query


def main() -> None:
    # Params as a web framework hands them over for:
    # /events?status=published&starts_at[gte]=2024-01-01&sort=-starts_at&limit=20&after=abc123
    params = {
        "status": "published",
        "starts_at": {"gte": "2024-01-01"},
        "sort": "-starts_at",
        "limit": "20",
        "after": "abc123",
    }

    print("=== normalize ===")
    canonical = normalize(params)
    for key, value in canonical.items():
        print(f"  {key}: {value}")

    # Only schema fields become filters; the rest is kept at the top level
    print("\n=== normalize with a filterable set ===")
    canonical = normalize({"status": "draft", "ref": "newsletter"}, {"status"})
    print(f"  {canonical}")

    # Links for the next page, keeping unrelated params from the request path
    print("\n=== build_path ===")
    query = Query(
        filters=[Filter(field="amount", op=">=", value=100)],
        order_by=["starts_at"],
        order_directions=["desc"],
        page=3,
        page_size=25,
    )
    meta = Meta(query=query, total_count=120, has_next_page=True)
    print(f"  to_query:   {to_query(meta)}")
    print(f"  build_path: {build_path('/events?page=2&ref=newsletter', meta)}")


if __name__ == "__main__":
    main()
