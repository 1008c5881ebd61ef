from fastapi import APIRouter, Depends, Request

from api.dependencies.rate_limits import enforce_default_rate_limit
from infrastructure.services import LangDep, ResponsesDep, SettingsDep
from server.routing import EnvelopeRoute

router = APIRouter(tags=["System"], route_class=EnvelopeRoute)


# Load balancer and uptime checks poll these endpoints, so the limit is generous.
@router.get("/version", dependencies=[Depends(enforce_default_rate_limit)])
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Get the version of the application.

    Returned raw; the envelope route wraps it.
    """
    return {"version": settings.GIT_SHA}


@router.get("/health", dependencies=[Depends(enforce_default_rate_limit)])
def get_health(
    request: Request, lang: LangDep, responses: ResponsesDep
):  # pylint: disable=unused-argument
    """Healthcheck endpoint."""
    return responses.success_single({"status": "ok"}, "system.health.ok", lang)
