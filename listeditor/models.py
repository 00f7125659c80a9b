# -*- coding: utf-8 -*-

##########################################
#     This file forms part of LISTEDITOR
#     Copyright: refer to COPYRIGHT.txt
#     License: refer to LICENSE.txt
##########################################

import re
from collections.abc import Mapping

from zope.interface import Interface
from zope.interface import Attribute


class IListEditorController(Interface):
    """
    The capability a controller needs to have so the generic
    list editor actions and helpers can operate on it
    """

    resource_parents = Attribute("Ordered parent objects, outermost first, "
                                 "used to build nested-resource URLs")

    def klass():
        """ The domain class being edited """

    def option_set():
        """ The OptionSet registered for the controller """

    def form_reference():
        """ The form template used by the add/edit dialog """


class IPersistence(Interface):
    """
    The persistence collaborator. listeditor never talks to a database
    directly, it only calls these methods
    """

    def build(klass):
        """ Returns a new blank (not persisted) instance of klass """

    def find(klass, id):
        """ Returns the instance of klass with the given id or None """

    def create(klass, attrs):
        """ Creates, persists and returns a new instance of klass """

    def update(target, attrs):
        """ Applies attrs to target and persists it """

    def destroy(target):
        """ Deletes target """

    def is_valid(target):
        """ Returns True if target passes domain validation """


class IRouter(Interface):
    """
    The routing collaborator
    """

    def resolve_path(route_name, *params):
        """
        Returns a path for the named route, filled with params.
        Raises UnresolvedRoute if the route does not exist
        """


class IListEditorRegistry(Interface):
    """ Marker for a ListEditorRegistry registered as a utility """


_first_cap_re = re.compile(r'(.)([A-Z][a-z]+)')
_all_cap_re = re.compile(r'([a-z0-9])([A-Z])')


def demodulize(name):
    """
    Strips the module path: 'shop.models.LineItem' -> 'LineItem'
    """
    if not isinstance(name, str):
        name = getattr(name, '__name__', str(name))
    return name.rpartition('.')[2]


def underscore(name):
    """
    'LineItem' -> 'line_item'. Accepts a class or a string
    """
    name = demodulize(name)
    s1 = _first_cap_re.sub(r'\1_\2', name)
    return _all_cap_re.sub(r'\1_\2', s1).lower()


def show_always(obj):
    return True


def show_add_always():
    return True


OPTION_KEYS = (
    'target_class',
    'form_reference',
    'display_property',
    'display_partial',
    'view_properties',
    'edit_image',
    'delete_image',
    'show_edit',
    'show_delete',
    'show_add',
    'list_id',
    'description',
    'size',
    'hide',
    'create',
    'urls',
    'add_title',
)


class OptionSet(Mapping):
    """
    The configuration of one editable list. Available options:

    display_property - The object attribute used as the display label for the object in the list
    display_partial - A template used to display the object in the list instead of a property;
                      takes precedence over display_property

    view_properties - Properties to display in a collapsable box under the list entry

    edit_image, delete_image - Icons displayed for the 'edit' and 'delete' actions

    show_edit, show_delete - callables taking the object and returning whether the
                             link should be displayed for that object
    show_add - a callable without arguments deciding whether the 'add' link is displayed

    list_id - The id of the list container, 'classname'_list by default
    description - The description used in the add/edit/delete link titles
    size - a sizing hint for the dialog
    create - a callable (controller, params) -> object used instead of
             the default creation, for example to create nested objects
    urls - a mapping of operation name to a route name or to a callable
           building the URL, bypassing the naming convention
    add_title - the title of the 'new' dialog

    An OptionSet can't be modified, use `merge` to get an updated copy.
    """

    def __init__(self, **values):
        unknown = set(values) - set(OPTION_KEYS)
        if unknown:
            raise ValueError("Unknown list editor options: %s" % ', '.join(sorted(unknown)))
        data = dict((k, None) for k in OPTION_KEYS)
        data.update(values)
        data['view_properties'] = tuple(data['view_properties'] or ())
        data['urls'] = dict(data['urls'] or {})
        object.__setattr__(self, '_values', data)

    @classmethod
    def defaults(cls, target_class, form_reference=None):
        return cls(target_class=target_class,
                   form_reference=form_reference,
                   display_property='__str__',
                   display_partial=None,
                   view_properties=(),
                   edit_image='list_editor/pencil.png',
                   delete_image='list_editor/cross.png',
                   show_edit=show_always,
                   show_delete=show_always,
                   show_add=show_add_always,
                   list_id="%s_list" % underscore(target_class),
                   description=demodulize(target_class),
                   size='',
                   hide=False,
                   create=None,
                   urls={},
                   add_title=None)

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        raise AttributeError("OptionSet is immutable, use merge() instead")

    def __getitem__(self, key):
        return self._values[key]

    def __iter__(self):
        return iter(OPTION_KEYS)

    def __len__(self):
        return len(OPTION_KEYS)

    def as_dict(self):
        return dict(self._values)

    def __repr__(self):
        return "<OptionSet for %s>" % demodulize(self.target_class)


def merge(base, overrides=None):
    """
    Returns a new OptionSet with `overrides` applied over `base`.
    None values in overrides leave the base value in place.
    """
    values = base.as_dict()
    if overrides:
        for (key, value) in overrides.items():
            if key not in values:
                raise ValueError("Unknown list editor option: %s" % key)
            if value is None:
                continue
            values[key] = value
    return OptionSet(**values)


class RenderDirective(object):
    """
    A template reference plus the locals to render it with. This is
    what the actions and helpers produce; turning it into markup
    is the templating engine's job
    """

    def __init__(self, template, locals=None):
        self.template = template
        self.locals = dict(locals or {})

    def __getitem__(self, key):
        return self.locals[key]

    def __repr__(self):
        return "<RenderDirective %s>" % self.template


class Endpoint(object):
    """
    A resolved URL for one CRUD operation
    """

    def __init__(self, operation, route_name, params, path):
        self.operation = operation
        self.route_name = route_name
        self.params = tuple(params)
        self.path = path

    def __str__(self):
        return self.path

    def __eq__(self, other):
        if not isinstance(other, Endpoint):
            return NotImplemented
        return (self.operation, self.route_name, self.params, self.path) == \
            (other.operation, other.route_name, other.params, other.path)

    def __hash__(self):
        return hash((self.operation, self.route_name, self.path))

    def __repr__(self):
        return "<Endpoint %s %s>" % (self.operation, self.path)
