from .stage_banner import stage_banner
