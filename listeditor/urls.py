# -*- coding: utf-8 -*-

##########################################
#     This file forms part of LISTEDITOR
#     Copyright: refer to COPYRIGHT.txt
#     License: refer to LICENSE.txt
##########################################

import logging
import re

from zope.interface import implementer
from pyramid.interfaces import IRoutesMapper

from listeditor.exceptions import UnresolvedRoute
from listeditor.models import Endpoint
from listeditor.models import IRouter
from listeditor.models import underscore

log = logging.getLogger(__name__)


OP_PREFIXES = {'new': 'new_',
               'create': '',
               'edit': 'edit_',
               'update': '',
               'delete': ''}

OP_POSTFIXES = {'new': '_path',
                'create': 's_path',
                'edit': '_path',
                'update': '_path',
                'delete': '_path'}

# operations which act on the collection rather than on an object
COLLECTION_OPERATIONS = ('new', 'create')


def _check_operation(operation):
    if operation not in OP_PREFIXES:
        raise ValueError("Unknown list editor operation '%s'" % operation)


def route_name(operation, target_class, parents=()):
    """
    Builds the conventional route name for an operation::

        route_name('edit', Comment)          -> 'edit_comment_path'
        route_name('create', Comment)        -> 'comments_path'
        route_name('edit', Comment, [post])  -> 'edit_post_comment_path'

    `parents` are the parent objects (or their classes), outermost first
    """
    _check_operation(operation)
    name = OP_PREFIXES[operation]
    for parent in parents:
        if not isinstance(parent, type):
            parent = parent.__class__
        name += "%s_" % underscore(parent)
    name += "%s%s" % (underscore(target_class), OP_POSTFIXES[operation])
    return name


class UrlResolver(object):
    """
    Resolves the URL of a CRUD operation on a class or on an object.

    If the list is edited as a nested resource, pass the parent objects
    as `parents`. If you're editing Children from a Parent page the
    controller would set up the chain like this::

        class ChildrenController(listeditor.ListEditorController):

            def setup_resource(self):
                return [self.find_parent()]

    and the resolver would use `edit_parent_child_path` with the parent and
    the child as the parameters instead of `edit_child_path`.

    The `urls` option of the list editor bypasses the convention for
    the operations it lists. A value is either a route name or a callable
    which is passed the parameters and returns the URL.
    """

    def __init__(self, router):
        self.router = router

    def resolve(self, operation, target_class, target=None, parents=None, url_overrides=None):
        _check_operation(operation)
        parents = list(parents or ())

        params = list(parents)
        if target is not None and operation not in COLLECTION_OPERATIONS:
            params.append(target)

        override = None
        if url_overrides:
            override = url_overrides.get(operation)

        if override is not None and callable(override):
            path = override(*params)
            log.debug("Resolved %s for %s with a custom builder: %s", operation, target_class.__name__, path)
            return Endpoint(operation, None, params, path)

        if override is not None:
            name = override
        else:
            name = route_name(operation, target_class, parents)

        try:
            path = self.router.resolve_path(name, *params)
        except UnresolvedRoute as e:
            raise UnresolvedRoute(operation, name, e.reason) from None

        log.debug("Resolved %s for %s via route '%s': %s", operation, target_class.__name__, name, path)
        return Endpoint(operation, name, params, path)

    def entry_actions(self, options, obj, parents=None):
        """
        Returns the edit_action and delete_action URLs for a list entry,
        each one only if the corresponding show_ predicate allows it
        """
        actions = {}
        if options.show_edit(obj):
            actions['edit_action'] = self.resolve('edit', options.target_class, obj, parents, options.urls)
        if options.show_delete(obj):
            actions['delete_action'] = self.resolve('delete', options.target_class, obj, parents, options.urls)
        return actions


_star_re = re.compile(r'\*(\w+)$')


def placeholder_names(pattern):
    """
    Returns the names of the replacement markers of a route pattern in the
    order they appear. Markers may carry a regex with braces of its own,
    like `{id:[0-9]{2}}`, and the pattern may end with a `*remainder`
    """
    names = []
    depth = 0
    start = None
    for (i, c) in enumerate(pattern):
        if c == '{':
            if depth == 0:
                start = i + 1
            depth += 1
        elif c == '}' and depth:
            depth -= 1
            if depth == 0:
                names.append(pattern[start:i].split(':', 1)[0].strip())
    star = _star_re.search(pattern)
    if star is not None:
        names.append(star.group(1))
    return names


def path_segment(param):
    """
    Turns a route parameter into a URL segment. Objects are
    represented by their ids
    """
    if hasattr(param, 'id'):
        return str(param.id)
    return str(param)


@implementer(IRouter)
class PyramidRouter(object):
    """
    Resolves route names using Pyramid's URL dispatch. The route's placeholders
    are filled with the parameters in the order they appear in the pattern,
    i.e. for a route `/posts/{post_id}/comments/{id}/edit` the parameters
    would be a post and a comment
    """

    def __init__(self, request):
        self.request = request

    def get_route(self, route_name):
        mapper = self.request.registry.queryUtility(IRoutesMapper)
        if mapper is None:
            return None
        return mapper.get_route(route_name)

    def resolve_path(self, route_name, *params):
        route = self.get_route(route_name)
        if route is None:
            raise UnresolvedRoute(None, route_name, "no such route")

        names = placeholder_names(route.pattern)
        if len(names) != len(params):
            raise UnresolvedRoute(None, route_name,
                "route pattern %s expects %d parameters, got %d" % (route.pattern, len(names), len(params)))

        kw = dict(zip(names, [path_segment(p) for p in params]))
        return self.request.route_path(route_name, **kw)
