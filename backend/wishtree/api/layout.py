"""Layout snapshots: raw engine output and the composed scene."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from wishtree.dependencies import get_layout_config, get_light_config, get_scene, get_silhouette
from wishtree.engine.layout import LayoutConfig, LightConfig, place_ornaments, scatter_lights
from wishtree.engine.silhouette import Silhouette
from wishtree.models.responses import LayoutResponse, OrnamentOut, SceneResponse
from wishtree.shell.scene import Scene

router = APIRouter()


@router.get("/layout", response_model=LayoutResponse)
async def layout(
    ornaments: int = Query(default=12, ge=0, le=500),
    lights: int = Query(default=28, ge=0, le=2000),
    silhouette: Silhouette = Depends(get_silhouette),
    layout_cfg: LayoutConfig = Depends(get_layout_config),
    light_cfg: LightConfig = Depends(get_light_config),
) -> LayoutResponse:
    return LayoutResponse(
        silhouette=silhouette.kind,
        ornaments=place_ornaments(silhouette, ornaments, layout_cfg),
        lights=scatter_lights(silhouette, lights, light_cfg),
    )


@router.get("/scene", response_model=SceneResponse)
async def scene(scene: Scene = Depends(get_scene)) -> SceneResponse:
    star = scene.star.message
    return SceneResponse(
        silhouette=scene.silhouette.kind,
        outline=scene.silhouette.svg_path(),
        star_message_id=star.id if star is not None else None,
        ornaments=[
            OrnamentOut(
                slot=o.slot,
                message_id=o.message.id,
                x=o.item.x,
                y=o.item.y,
                color=o.item.color,
                bob_duration=o.bob_duration,
                bob_delay=o.bob_delay,
            )
            for o in scene.ornaments
        ],
        lights=scene.lights,
        snow=scene.snow,
    )
