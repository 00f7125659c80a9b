# -*- coding: utf-8 -*-

##########################################
#     This file forms part of LISTEDITOR
#     Copyright: refer to COPYRIGHT.txt
#     License: refer to LICENSE.txt
##########################################

import logging

from listeditor.exceptions import NotFound
from listeditor.formatting import entry_display
from listeditor.models import RenderDirective

log = logging.getLogger(__name__)


DIALOG_TEMPLATE = 'listeditor:templates/dialog.pt'
ADD_ENTRY_TEMPLATE = 'listeditor:templates/add_entry.pt'
EDIT_ENTRY_TEMPLATE = 'listeditor:templates/edit_entry.pt'
DELETE_ENTRY_TEMPLATE = 'listeditor:templates/delete_entry.pt'


def setup_update(options, target, persistence):
    """
    Builds the locals for the add/edit/delete entry templates.

    `successful` is False if there's no object or it does not pass
    validation, the template decides what to show in this case
    """
    result = {
        'entry': target,
        'successful': target is not None and persistence.is_valid(target),
        'show_edit': options.show_edit,
        'show_delete': options.show_delete,
        'view_properties': options.view_properties,
        'edit_image': options.edit_image,
        'delete_image': options.delete_image,
        'list_id': options.list_id,
        'form_reference': options.form_reference,
        'size': options.size,
    }
    if options.display_partial:
        result['display_partial'] = options.display_partial
    else:
        result['display_property'] = options.display_property
    return result


class ActionHandlers(object):
    """
    The generic CRUD actions of a list editor. They work with any controller
    providing IListEditorController and delegate the actual work to the
    persistence collaborator. Each action returns a RenderDirective.

    `edit`, `update` and `destroy` need the object to be looked up
    first with `find_object`.
    """

    def __init__(self, controller, persistence, resolver):
        self.controller = controller
        self.persistence = persistence
        self.resolver = resolver

    @property
    def klass(self):
        return self.controller.klass()

    @property
    def options(self):
        return self.controller.option_set()

    def build_url(self, operation, target=None):
        return self.resolver.resolve(operation, self.klass, target,
                                     self.controller.resource_parents, self.options.urls)

    def find_object(self, id):
        obj = self.persistence.find(self.klass, id)
        if obj is None:
            log.debug("%s %r not found", self.klass.__name__, id)
            raise NotFound(self.klass, id)
        return obj

    def new(self):
        obj = self.persistence.build(self.klass)
        title = self.options.add_title
        if not title:
            title = "Add a new %s" % self.klass.__name__
        return RenderDirective(DIALOG_TEMPLATE, {
            'edit_object': obj,
            'url': self.build_url('create'),
            'form_partial': self.controller.form_reference(),
            'title': title,
        })

    def create(self, params):
        create = self.options.create
        # the `create` option is used when the object needs to be
        # created as a child of some other object
        if create is not None:
            obj = create(self.controller, params)
        else:
            obj = self.persistence.create(self.klass, params)
        log.info("Created %s %s", self.klass.__name__, getattr(obj, 'id', None))
        return self._entry_directive(ADD_ENTRY_TEMPLATE, obj, 'post_create_callback')

    def edit(self, target):
        return RenderDirective(DIALOG_TEMPLATE, {
            'edit_object': target,
            'url': self.build_url('update', target),
            'form_partial': self.controller.form_reference(),
            'title': "Edit %s" % self.klass.__name__,
        })

    def update(self, target, params):
        self.persistence.update(target, params)
        log.info("Updated %s %s", self.klass.__name__, getattr(target, 'id', None))
        return self._entry_directive(EDIT_ENTRY_TEMPLATE, target, 'post_edit_callback')

    def destroy(self, target):
        self.persistence.destroy(target)
        log.info("Deleted %s %s", self.klass.__name__, getattr(target, 'id', None))
        return self._entry_directive(DELETE_ENTRY_TEMPLATE, target, 'post_delete_callback', with_actions=False)

    def _entry_directive(self, template, target, callback, with_actions=True):
        options = self.options
        locals = setup_update(options, target, self.persistence)
        locals['callback'] = callback
        if with_actions and locals['successful']:
            locals.update(self.resolver.entry_actions(options, target, self.controller.resource_parents))
            if not options.display_partial:
                locals['label'] = entry_display(target, options.display_property)
        return RenderDirective(template, locals)
