from contextlib import asynccontextmanager
import logging

from resumefit.core.config.scoring import get_scoring_config
from resumefit.lexicon import get_default_lexicon

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    lexicon = get_default_lexicon()
    get_scoring_config()
    logger.info(
        "lexicon_loaded technical=%d soft=%d industry=%d",
        len(lexicon.technical_terms),
        len(lexicon.soft_terms),
        len(lexicon.industry_terms),
    )
    yield
