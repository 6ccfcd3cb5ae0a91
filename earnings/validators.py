"""
Request Validation for the Solar Earnings Engine

Validates the shape of API requests before they reach the engine.
Raises ValueError with clear messages for any constraint violations.

Project *contents* are never validated here: malformed numbers, dates and
tiers are handled fail-soft by the engine itself.
"""


class RequestValidator:
    """Validates request payloads for each API operation."""

    def validate_breakdown(self, data) -> None:
        self._require_object(data, "request body")
        if "project" not in data:
            raise ValueError("project is required")
        self._require_object(data["project"], "project")

    def validate_projects_request(self, data, require_year: bool = True) -> None:
        """
        Run the checks shared by every collection operation.
        Raises ValueError if any check fails.
        """
        self._require_object(data, "request body")
        self._validate_projects(data.get("projects"))

        if require_year:
            self._validate_year(data.get("year"))

        if data.get("office") is not None and not isinstance(data["office"], str):
            raise ValueError(f"office must be a string, got: {type(data['office']).__name__}")

    def validate_user_request(self, data, require_year: bool = False) -> None:
        self.validate_projects_request(data, require_year=require_year)

        user_id = data.get("user_id")
        if not isinstance(user_id, str) or not user_id:
            raise ValueError("user_id is required and must be a non-empty string")

    def _validate_projects(self, projects) -> None:
        if projects is None:
            raise ValueError("projects is required")

        if not isinstance(projects, list):
            raise ValueError(f"projects must be a list, got: {type(projects).__name__}")

        for i, project in enumerate(projects):
            if not isinstance(project, dict):
                raise ValueError(f"Project {i} must be an object, got: {type(project).__name__}")

    def _validate_year(self, year) -> None:
        # bool is an int subclass; reject it explicitly
        if isinstance(year, bool) or not isinstance(year, int):
            raise ValueError(f"year must be an integer, got: {year!r}")

    def _require_object(self, value, name: str) -> None:
        if not isinstance(value, dict):
            raise ValueError(f"{name} must be an object")
