MISSING_REQUIREMENTS: str = (
    "Model cannot make changes to the server without an RDT, "
    "and a Resource path. See documentation for details."
)

ENV_HOST_URL = "FAM_HOST_URL"
ENV_VERIFY = "FAM_VERIFY"

DEFAULT_HEADERS: dict = {
    "Accept": "application/json",
}

MODEL_OPTIONS = ("rdt", "resource", "resource_path", "id", "json_root")
