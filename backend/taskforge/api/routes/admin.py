"""Admin Routes — actions restricted to the admin role."""

from fastapi import APIRouter, Depends

from taskforge.api.dependencies import require_roles

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.post("/admin-action", dependencies=[Depends(require_roles("admin"))])
async def admin_action():
    return {"message": "Admin action performed."}
