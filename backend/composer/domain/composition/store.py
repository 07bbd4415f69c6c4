from __future__ import annotations

import copy
import dataclasses
import logging
from collections.abc import Mapping
from functools import singledispatch
from typing import Any, Iterable, Optional

from ..ai.patch import changed_keys, merge_props
from ..sections.registry import SectionRegistry
from ..sections.types import SectionDefinition
from . import reorder as reorder_engine
from .actions import (
    Action,
    AddSection,
    ApplyAIPatch,
    ApplyTemplate,
    RemoveSection,
    ReorderSections,
    SelectSection,
    SetClasses,
    SetProps,
)
from .state import EditorState, IdFactory, PageSection, fresh_id, generate_section_id
from .templates import RefLike, expand_template

logger = logging.getLogger(__name__)


def transition(
    state: EditorState,
    action: Action,
    registry: SectionRegistry,
    id_factory: IdFactory = generate_section_id,
) -> EditorState:
    """
    Pure reducer: (state, action) -> new state.

    Every action is total. Unknown section ids, out-of-range indices and
    malformed payloads return the state unchanged.
    """
    return _apply(action, state, registry, id_factory)


@singledispatch
def _apply(action, state, registry, id_factory):
    logger.debug("Ignoring unsupported action %r", action)
    return state


@_apply.register
def _(action: AddSection, state, registry, id_factory):
    definition = registry.get_by_id(action.section_id)
    if definition is None:
        return state

    section = PageSection(
        id=fresh_id(set(state.section_ids), id_factory),
        section_id=definition.id,
        props=copy.deepcopy(dict(definition.default_props)),
    )
    sections = state.sections + (section,)
    return EditorState(sections=sections, selection=len(sections) - 1)


@_apply.register
def _(action: RemoveSection, state, registry, id_factory):
    index = action.index
    if not state.in_range(index):
        return state

    sections = state.sections[:index] + state.sections[index + 1:]

    selection = state.selection
    if selection == index:
        selection = None
    elif selection is not None and selection > index:
        selection -= 1

    return EditorState(sections=sections, selection=selection)


def _replace_selected(state: EditorState, index: Any, **changes) -> EditorState:
    # editing only ever targets the selected section
    if not state.in_range(index) or index != state.selection:
        return state

    sections = list(state.sections)
    sections[index] = dataclasses.replace(sections[index], **changes)
    return EditorState(sections=tuple(sections), selection=state.selection)


@_apply.register
def _(action: SetProps, state, registry, id_factory):
    if not isinstance(action.props, Mapping):
        return state
    return _replace_selected(state, action.index, props=dict(action.props))


@_apply.register
def _(action: SetClasses, state, registry, id_factory):
    if not isinstance(action.classes, str):
        return state
    return _replace_selected(state, action.index, custom_classes=action.classes)


@_apply.register
def _(action: ReorderSections, state, registry, id_factory):
    from_index, to_index = action.from_index, action.to_index

    if not (state.in_range(from_index) and state.in_range(to_index)):
        return state
    if from_index == to_index:
        return state
    if state.sections[from_index].id == state.sections[to_index].id:
        return state

    sections, selection = reorder_engine.reorder(
        state.sections, from_index, to_index, state.selection
    )
    return EditorState(sections=sections, selection=selection)


@_apply.register
def _(action: ApplyTemplate, state, registry, id_factory):
    refs = action.refs if isinstance(action.refs, (list, tuple)) else ()
    sections = expand_template(refs, registry, id_factory)
    # bulk replacement never keeps a selection
    return EditorState(sections=sections, selection=None)


@_apply.register
def _(action: SelectSection, state, registry, id_factory):
    if action.index is None:
        return EditorState(sections=state.sections, selection=None)
    if not state.in_range(action.index):
        return state
    return EditorState(sections=state.sections, selection=action.index)


@_apply.register
def _(action: ApplyAIPatch, state, registry, id_factory):
    if not isinstance(action.proposed, Mapping):
        return state

    index = next(
        (i for i, s in enumerate(state.sections) if s.id == action.target_id), None
    )
    # a late response must not clobber a composition that moved on
    if index is None or index != state.selection:
        logger.info(
            "Dropping stale AI patch for section %s (selection=%s)",
            action.target_id,
            state.selection,
        )
        return state

    current = state.sections[index].props
    accepted = action.accepted_keys
    if accepted is None:
        accepted = changed_keys(current, action.proposed)
    elif not isinstance(accepted, (list, tuple, set, frozenset)):
        return state

    return _replace_selected(
        state, index, props=merge_props(current, action.proposed, accepted)
    )


class CompositionStore:
    """
    Holds the current snapshot for one editing session.

    Thin stateful wrapper over transition(); every method returns the new
    snapshot.
    """

    def __init__(
        self,
        registry: SectionRegistry,
        state: Optional[EditorState] = None,
        id_factory: IdFactory = generate_section_id,
    ):
        self.registry = registry
        self.state = state or EditorState()
        self._id_factory = id_factory

    @property
    def sections(self):
        return self.state.sections

    @property
    def selection(self) -> Optional[int]:
        return self.state.selection

    @property
    def selected_section(self) -> Optional[PageSection]:
        return self.state.selected_section

    @property
    def selected_definition(self) -> Optional[SectionDefinition]:
        section = self.selected_section
        if section is None:
            return None
        return self.registry.get_by_id(section.section_id)

    def dispatch(self, action: Action) -> EditorState:
        self.state = transition(self.state, action, self.registry, self._id_factory)
        return self.state

    def add(self, section_id: str) -> EditorState:
        return self.dispatch(AddSection(section_id))

    def remove(self, index: int) -> EditorState:
        return self.dispatch(RemoveSection(index))

    def set_props(self, index: int, props) -> EditorState:
        return self.dispatch(SetProps(index, props))

    def set_classes(self, index: int, classes: str) -> EditorState:
        return self.dispatch(SetClasses(index, classes))

    def reorder(self, from_index: int, to_index: int) -> EditorState:
        return self.dispatch(ReorderSections(from_index, to_index))

    def apply_template(self, refs: Iterable[RefLike]) -> EditorState:
        return self.dispatch(ApplyTemplate(tuple(refs)))

    def select(self, index: Optional[int]) -> EditorState:
        return self.dispatch(SelectSection(index))

    def apply_ai_patch(self, target_id: str, proposed, accepted_keys=None) -> EditorState:
        if accepted_keys is not None:
            accepted_keys = tuple(accepted_keys)
        return self.dispatch(ApplyAIPatch(target_id, proposed, accepted_keys))
