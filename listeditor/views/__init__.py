# -*- coding: utf-8 -*-

##########################################
#     This file forms part of LISTEDITOR
#     Copyright: refer to COPYRIGHT.txt
#     License: refer to LICENSE.txt
##########################################

from zope.interface import implementer

from pyramid.httpexceptions import HTTPNotFound
from pyramid.renderers import render_to_response

from listeditor.actions import ActionHandlers
from listeditor.exceptions import ListEditorError
from listeditor.exceptions import NotFound
from listeditor.models import IListEditorController
from listeditor.models import IListEditorRegistry
from listeditor.models import IPersistence
from listeditor.models import underscore
from listeditor.registry import default_registry
from listeditor.registry import get_registry_by_name
from listeditor.urls import PyramidRouter
from listeditor.urls import UrlResolver


@implementer(IListEditorController)
class ListEditorController(object):
    """
    A base class for controllers providing the AJAX CRUD actions of a list editor::

        @listeditor.list_editor(models.Widget, 'myapp:templates/widget_form.pt',
                                display_property='name')
        class WidgetsController(listeditor.ListEditorController):
            pass

        config.add_list_editor(WidgetsController)

    `find_object` fetches the object for edit, update and destroy - override it
    for different behaviour. `setup_resource` returns the parent objects if the
    list is edited as a nested resource::

        class ChildrenController(listeditor.ListEditorController):

            def find_parent(self):
                return DBSession.query(Parent).get(self.request.matchdict['parent_id'])

            def setup_resource(self):
                return [self.find_parent()]

            def find_object(self):
                return self.find_parent().children.filter_by(id=self.request.matchdict['id']).first()

    """

    registry = None
    """
    The ListEditorRegistry (or its name) the controller is registered with.
    If None, the registry set up by `includeme` or the default one is used
    """

    persistence = None
    """
    An IPersistence implementation. If None, the one registered with
    `config.set_list_editor_persistence` is used
    """

    def __init__(self, context, request):
        self.context = context
        self.request = request
        self.resource_parents = list(self.setup_resource() or ())

    def setup_resource(self):
        return []

    def find_registry(self):
        if self.registry is not None:
            if isinstance(self.registry, str):
                return get_registry_by_name(self.registry)
            return self.registry

        registry = self.request.registry.queryUtility(IListEditorRegistry)
        if registry is not None:
            return registry
        return default_registry

    def registry_entry(self):
        return self.find_registry().lookup(self.__class__)

    def klass(self):
        return self.registry_entry().target_class

    def option_set(self):
        return self.registry_entry().options

    def form_reference(self):
        return self.registry_entry().form_reference

    def get_persistence(self):
        if self.persistence is not None:
            return self.persistence
        persistence = self.request.registry.queryUtility(IPersistence)
        if persistence is None:
            raise ListEditorError("No list editor persistence configured, "
                                  "use config.set_list_editor_persistence()")
        return persistence

    def get_resolver(self):
        return UrlResolver(PyramidRouter(self.request))

    def get_handlers(self):
        return ActionHandlers(self, self.get_persistence(), self.get_resolver())

    def find_object(self):
        """
        Fetches the object the action operates on. Override in your controller
        for different behavior; return None if there's no such object
        """
        try:
            return self.get_handlers().find_object(self.request.matchdict.get('id'))
        except NotFound:
            return None

    def object_params(self):
        """
        Returns the submitted attributes of the object. Fields named
        `widget[name]` are collected into {'name': ...}; if there are no
        such fields all POST values except the ones starting with an underscore
        (like `_method`) are returned
        """
        prefix = "%s[" % underscore(self.klass())
        params = {}
        for (k, v) in self.request.POST.items():
            if k.startswith(prefix) and k.endswith(']'):
                params[k[len(prefix):-1]] = v
        if not params:
            params = dict((k, v) for (k, v) in self.request.POST.items() if not k.startswith('_'))
        return params

    def render(self, directive):
        return render_to_response(directive.template, directive.locals, request=self.request)

    def _required_object(self):
        obj = self.find_object()
        if obj is None:
            raise HTTPNotFound()
        return obj

    def new(self):
        return self.render(self.get_handlers().new())

    def create(self):
        return self.render(self.get_handlers().create(self.object_params()))

    def edit(self):
        return self.render(self.get_handlers().edit(self._required_object()))

    def update(self):
        return self.render(self.get_handlers().update(self._required_object(), self.object_params()))

    def destroy(self):
        return self.render(self.get_handlers().destroy(self._required_object()))
