"""Header construction for upstream requests."""


class HeaderBuilder:
    """Build upstream headers for forwarded requests."""

    def build_upstream_headers(self) -> dict[str, str]:
        """Forwarded requests always carry a JSON content type and nothing else."""
        return {"Content-Type": "application/json"}
