"""
In-place replacement of a model's contents.
"""

import logging

from eppy.modeleditor import IDF

logger = logging.getLogger(__name__)


def overwrite_existing_model(existing_model: IDF, new_model: IDF) -> IDF:
    """
    Replace every object of ``existing_model`` with copies of ``new_model``'s objects.

    The identity of ``existing_model`` is kept so callers holding a reference
    see the new content. There is no rollback: an exception while adding
    objects leaves the model partially filled and should abort the run.

    Args:
        existing_model: Model to overwrite (mutated)
        new_model: Model whose objects are copied in

    Returns:
        ``existing_model``
    """
    if existing_model is new_model:
        return existing_model

    handles = [obj for objects in existing_model.idfobjects.values() for obj in objects]
    for obj in handles:
        existing_model.removeidfobject(obj)

    added = 0
    for objects in list(new_model.idfobjects.values()):
        for obj in objects:
            existing_model.copyidfobject(obj)
            added += 1

    logger.debug(f"Overwrote model: removed {len(handles)} objects, added {added}")
    return existing_model
