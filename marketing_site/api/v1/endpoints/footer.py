"""
Footer content for the rendering layer.
"""

from fastapi import APIRouter, HTTPException, status
from typing import Dict, Any

from marketing_site.core.exceptions import FooterVariantNotFound
from marketing_site.core.footer import get_footer_config, resolve_footer_variant

router = APIRouter()


@router.get("/footer", status_code=status.HTTP_200_OK)
async def get_default_footer() -> Dict[str, Any]:
    return get_footer_config().model_dump(mode="json", by_alias=True)


@router.get("/footer/{variant}", status_code=status.HTTP_200_OK)
async def get_footer_variant(variant: str) -> Dict[str, Any]:
    """
    Get a named footer preset (e.g. `minimal` for the 404 page).

    Args:
        variant: Preset name

    Returns:
        dict: Footer configuration with camelCase keys
    """
    try:
        footer = resolve_footer_variant(variant)
    except FooterVariantNotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    return footer.model_dump(mode="json", by_alias=True)
