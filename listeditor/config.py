# -*- coding: utf-8 -*-

##########################################
#     This file forms part of LISTEDITOR
#     Copyright: refer to COPYRIGHT.txt
#     License: refer to LICENSE.txt
##########################################

import logging

from pyramid.events import ApplicationCreated

from listeditor.models import IListEditorRegistry
from listeditor.models import IPersistence
from listeditor.models import underscore
from listeditor.registry import default_registry
from listeditor.registry import get_registry_by_name
from listeditor.urls import route_name

log = logging.getLogger(__name__)


def includeme(config):
    """
    Sets listeditor up::

        config.include('listeditor')
        config.set_list_editor_persistence(SQLAlchemyPersistence(DBSession))
        config.add_list_editor(WidgetsController)

    The `listeditor.registry` setting selects the registry by name ('default'
    if not set). The registry is frozen once the application is created so no
    registrations can happen while requests are served.
    """
    config.include('pyramid_chameleon')

    settings = config.get_settings() or {}
    registry = get_registry_by_name(settings.get('listeditor.registry', 'default'))
    config.registry.registerUtility(registry, IListEditorRegistry)

    config.add_directive('add_list_editor', add_list_editor)
    config.add_directive('set_list_editor_persistence', set_list_editor_persistence)
    config.add_subscriber(freeze_registry, ApplicationCreated)


def freeze_registry(event):
    registry = event.app.registry.queryUtility(IListEditorRegistry)
    if registry is not None:
        registry.freeze()


def get_list_editor_registry(config):
    registry = config.registry.queryUtility(IListEditorRegistry)
    if registry is None:
        return default_registry
    return registry


def set_list_editor_persistence(config, persistence):
    """
    Registers the IPersistence implementation used by the list editor controllers
    """

    def register():
        config.registry.registerUtility(persistence, IPersistence)

    config.action(IPersistence, register)


def collection_pattern(target_class, parents=()):
    """
    '/widgets' or, for nested resources, '/posts/{post_id}/comments'
    """
    pattern = ''
    for parent in parents:
        name = underscore(parent)
        pattern += '/%ss/{%s_id}' % (name, name)
    return pattern + '/%ss' % underscore(target_class)


def add_list_editor(config, controller, pattern=None, parents=()):
    """
    Adds the routes and views for the actions of a list editor controller.
    The routes are named after the conventions used by the URL resolver:

        GET  /widgets/new          new_widget_path    -> new
        POST /widgets              widgets_path       -> create
        GET  /widgets/{id}/edit    edit_widget_path   -> edit
        POST /widgets/{id}         widget_path        -> update
        DELETE /widgets/{id}       widget_path        -> destroy

    (destroy also answers POST requests with a `_method=delete` parameter).

    `parents` is a list of parent classes for nested resources, outermost
    first; `pattern` replaces the collection pattern derived from the classes.
    """
    controller = config.maybe_dotted(controller)
    entry = get_list_editor_registry(config).lookup(controller)
    klass = entry.target_class

    if pattern is None:
        pattern = collection_pattern(klass, parents)
    pattern = pattern.rstrip('/')
    member = pattern + '/{id}'

    new_route = route_name('new', klass, parents)
    create_route = route_name('create', klass, parents)
    edit_route = route_name('edit', klass, parents)
    member_route = route_name('update', klass, parents)

    config.add_route(new_route, pattern + '/new')
    config.add_route(create_route, pattern)
    config.add_route(edit_route, member + '/edit')
    config.add_route(member_route, member)

    config.add_view(controller, attr='new', route_name=new_route, request_method='GET')
    config.add_view(controller, attr='create', route_name=create_route, request_method='POST')
    config.add_view(controller, attr='edit', route_name=edit_route, request_method='GET')
    config.add_view(controller, attr='update', route_name=member_route, request_method=('POST', 'PUT'))
    config.add_view(controller, attr='destroy', route_name=member_route, request_method='DELETE')
    config.add_view(controller, attr='destroy', route_name=member_route, request_method='POST',
                    request_param='_method=delete')

    log.debug("Added list editor routes for %s under %s", controller.__name__, pattern)
