# -*- coding: utf-8 -*-

##########################################
#     This file forms part of LISTEDITOR
#     Copyright: refer to COPYRIGHT.txt
#     License: refer to LICENSE.txt
##########################################

from pyramid.renderers import render

from listeditor.formatting import entry_display
from listeditor.models import IListEditorRegistry
from listeditor.models import RenderDirective
from listeditor.models import merge
from listeditor.registry import default_registry
from listeditor.urls import PyramidRouter
from listeditor.urls import UrlResolver


LIST_TEMPLATE = 'listeditor:templates/list.pt'
LIST_ENTRY_TEMPLATE = 'listeditor:templates/list_entry.pt'


class AddLink(object):
    """
    The "add a new item" link displayed under the list
    """

    def __init__(self, text, url, css_class='', rel='', title=''):
        self.text = text
        self.url = url
        self.css_class = css_class
        self.rel = rel
        self.title = title

    def __repr__(self):
        return "<AddLink %s>" % self.url


class ListEditorHelper(object):
    """
    Builds a list with the given objects providing AJAX CRUD operations.
    Unless specified, the options are taken from the list editor registration
    of the current controller.

    Sometimes the controller declaring the list editor isn't the current one.
    To display the line items of an order on the order page, where the list
    editor is declared by LineItemsController::

        @listeditor.list_editor(LineItem, 'shop:templates/line_item_form.pt',
                                display_partial='shop:templates/line_item.pt',
                                show_edit=lambda item: False,
                                show_add=lambda: False,
                                show_delete=lambda item: item.order.pending)
        class LineItemsController(listeditor.ListEditorController):
            ...

    and in the order view::

        helper = ListEditorHelper(request, controller=self)
        directive = helper.create_list_editor(order.line_items, controller='LineItemsController')

    The parent chain for nested resources is taken from the current
    controller's `resource_parents` unless passed explicitly.
    """

    def __init__(self, request, controller=None, registry=None, resolver=None, resource_parents=None):
        self.request = request
        self.controller = controller
        self.registry = registry
        if resolver is None:
            resolver = UrlResolver(PyramidRouter(request))
        self.resolver = resolver
        if resource_parents is None:
            resource_parents = getattr(controller, 'resource_parents', None) or []
        self.resource_parents = list(resource_parents)

    def find_registry(self):
        if self.registry is not None:
            return self.registry
        if hasattr(self.controller, 'find_registry'):
            return self.controller.find_registry()
        registry = self.request.registry.queryUtility(IListEditorRegistry)
        if registry is not None:
            return registry
        return default_registry

    def option_set(self, controller=None):
        if controller is None:
            controller = self.controller
        if controller is None:
            raise ValueError("No controller to take the list editor options from")
        return self.find_registry().lookup(controller).options

    def create_list_editor(self, objects, controller=None, link_text=None, link_class=None):
        options = self.option_set(controller)

        entries = [self.create_list_entry(o, controller=controller) for o in objects]

        add_link = None
        if options.show_add():
            if link_text is None:
                link_text = "Add a new %s" % options.description
            css_class = "lbOn %s" % (link_class or '')
            url = self.resolver.resolve('new', options.target_class, None,
                                        self.resource_parents, options.urls)
            add_link = AddLink(link_text, url, css_class.strip(), options.size,
                               "Add %s" % options.description.capitalize())

        return RenderDirective(LIST_TEMPLATE, {
            'list_id': options.list_id,
            'entries': entries,
            'add_link': add_link,
            'render': self.render,
        })

    def create_list_entry(self, obj, options=None, controller=None):
        opts = merge(self.option_set(controller), options)

        locals = opts.as_dict()
        locals.update(self.resolver.entry_actions(opts, obj, self.resource_parents))
        locals['object'] = obj
        if not opts.display_partial:
            locals['label'] = entry_display(obj, opts.display_property)
        return RenderDirective(LIST_ENTRY_TEMPLATE, locals)

    def render(self, directive):
        return render(directive.template, directive.locals, request=self.request)
