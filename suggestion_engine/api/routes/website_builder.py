"""
Website Builder API Routes

Template suggestions, preference snapshots, behavior tracking and the
component template library.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from suggestion_engine.api.dependencies import (
    BehaviorRecorderDep,
    PreferenceServiceDep,
    SuggestionServiceDep,
    get_current_user_id,
)
from suggestion_engine.config.settings import settings
from suggestion_engine.domain.suggestions.interfaces import COMPLEXITY_LEVELS, DEFAULT_COMPLEXITY
from suggestion_engine.domain.suggestions.template_library import (
    filter_templates,
    get_library_metadata,
    get_template,
    search_templates,
)
from suggestion_engine.infrastructure.db.models.user_behavior import (
    BehaviorAction,
    BehaviorItemType,
    UserBehavior,
)
from suggestion_engine.infrastructure.exceptions import NotFoundError, ValidationError


logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/website-builder",
    tags=["Website Builder"],
    dependencies=[Depends(get_current_user_id)],
)


# =============================================================================
# Request/Response Schemas
# =============================================================================

class TrackActionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    action: BehaviorAction = Field(..., description="view, implement, search or favorite")
    item_type: BehaviorItemType = Field(..., alias="itemType", description="template, file or category")
    item_id: str = Field(..., alias="itemId", min_length=1, max_length=255)
    item_details: Optional[Dict[str, Any]] = Field(None, alias="itemDetails")


class FavoriteTemplateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    template_id: str = Field(..., alias="templateId", min_length=1, max_length=255)
    category: Optional[str] = None
    complexity: Optional[str] = None
    tags: Optional[List[str]] = None


def _behavior_to_dict(record: UserBehavior) -> Dict[str, Any]:
    return {
        "id": record.id,
        "userId": record.user_id,
        "action": record.action,
        "itemType": record.item_type,
        "itemId": record.item_id,
        "itemDetails": record.item_details or {},
        "timestamp": record.timestamp.isoformat() if record.timestamp else None,
    }


# =============================================================================
# Suggestions & Preferences
# =============================================================================

@router.get("/suggestions")
async def get_suggestions(
    service: SuggestionServiceDep,
    user_id: int = Depends(get_current_user_id),
    limit: int = Query(settings.default_suggestion_limit, ge=1, le=settings.max_suggestion_limit),
    include_complexity: bool = Query(False, alias="includeComplexity"),
    include_categories: bool = Query(False, alias="includeCategories"),
    include_tags: bool = Query(False, alias="includeTags"),
):
    """Ranked template suggestions for the current user."""
    suggestions = await service.get_suggestions(
        user_id,
        limit=limit,
        include_complexity=include_complexity,
        include_categories=include_categories,
        include_tags=include_tags,
    )
    return {
        "suggestions": [s.to_dict() for s in suggestions],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/preferences")
async def get_preferences(
    service: PreferenceServiceDep,
    user_id: int = Depends(get_current_user_id),
):
    """Stored preference snapshot, computed on first request."""
    snapshot = await service.get_preferences(user_id)
    if snapshot is not None:
        return {"preferences": snapshot.to_dict(), "isNew": False}

    snapshot = await service.recompute_preferences(user_id)
    if snapshot is not None:
        return {"preferences": snapshot.to_dict(), "isNew": True}

    return {
        "preferences": {
            "userId": user_id,
            "preferredCategories": [],
            "preferredComplexity": DEFAULT_COMPLEXITY,
            "preferredTags": [],
            "lastActiveTimestamp": None,
        },
        "isNew": True,
    }


# =============================================================================
# Behavior Tracking
# =============================================================================

@router.post("/track")
async def track_action(
    body: TrackActionRequest,
    recorder: BehaviorRecorderDep,
    user_id: int = Depends(get_current_user_id),
):
    """Record an explicit user action."""
    recorded = await recorder.record_action(
        user_id=user_id,
        action=body.action,
        item_type=body.item_type,
        item_id=body.item_id,
        item_details=body.item_details,
    )
    if not recorded:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to track action"},
        )
    return {"success": True}


@router.post("/favorite")
async def favorite_template(
    body: FavoriteTemplateRequest,
    request: Request,
    recorder: BehaviorRecorderDep,
    preferences: PreferenceServiceDep,
    user_id: int = Depends(get_current_user_id),
):
    """Favorite a template and refresh the user's preferences."""
    # Recorded here; the capture middleware must not record it again
    request.state.behavior_recorded = True

    recorded = await recorder.record_action(
        user_id=user_id,
        action=BehaviorAction.FAVORITE.value,
        item_type=BehaviorItemType.TEMPLATE.value,
        item_id=body.template_id,
        item_details=body.model_dump(include={"category", "complexity", "tags"}, exclude_none=True),
    )
    if not recorded:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to favorite template"},
        )

    await preferences.recompute_preferences(user_id)
    return {"success": True}


@router.get("/history")
async def get_history(
    recorder: BehaviorRecorderDep,
    user_id: int = Depends(get_current_user_id),
    limit: int = Query(20, ge=1, le=100),
):
    """Most recent behavior records, newest first."""
    records = await recorder.get_history(user_id, limit=limit)
    return {
        "history": [_behavior_to_dict(r) for r in records],
        "count": len(records),
    }


# =============================================================================
# Template Library
# =============================================================================

@router.get("/templates")
async def list_templates(
    category: Optional[str] = Query(None),
    complexity: Optional[str] = Query(None),
    tags: Optional[str] = Query(None, description="Comma-separated tags"),
    include_metadata: bool = Query(False, alias="includeMetadata"),
):
    """Component template library with optional filters."""
    if complexity and complexity != "all" and complexity not in COMPLEXITY_LEVELS:
        raise ValidationError(
            f"Unknown complexity '{complexity}'",
            details={"allowed": ["all", *COMPLEXITY_LEVELS]},
        )

    tag_list = [t.strip() for t in tags.split(",") if t.strip()] if tags else None
    templates = filter_templates(category=category, tags=tag_list, complexity=complexity)

    response: Dict[str, Any] = {"templates": [t.to_dict() for t in templates]}
    if include_metadata:
        response["metadata"] = get_library_metadata()
    return response


@router.get("/templates/{template_id}")
async def get_template_by_id(template_id: str):
    """A single component template."""
    template = get_template(template_id)
    if template is None:
        raise NotFoundError(f"Template '{template_id}' not found", operation="get_template")
    return {"template": template.to_dict()}


@router.get("/search")
async def search(query: str = Query("", max_length=200)):
    """Search the template library by name, description and tags."""
    results = search_templates(query)
    return {
        "results": [t.to_dict() for t in results],
        "query": query,
        "total": len(results),
    }
