# -*- coding: utf-8 -*-

##########################################
#     This file forms part of LISTEDITOR
#     Copyright: refer to COPYRIGHT.txt
#     License: refer to LICENSE.txt
##########################################

import logging

from zope.interface import implementer

from listeditor.exceptions import NotRegistered
from listeditor.exceptions import RegistryFrozen
from listeditor.models import IListEditorRegistry
from listeditor.models import OptionSet
from listeditor.models import merge

log = logging.getLogger(__name__)

list_editor_registries = {}


class RegistryEntry(object):
    """
    What is stored for each controller: the class being edited,
    the form template and the merged options
    """

    def __init__(self, target_class, form_reference, options):
        self.target_class = target_class
        self.form_reference = form_reference
        self.options = options

    def __repr__(self):
        return "<RegistryEntry %s %s>" % (self.target_class.__name__, self.form_reference)


@implementer(IListEditorRegistry)
class ListEditorRegistry(object):
    """
    a ListEditorRegistry maps controllers to their list editor configuration.
    A default registry is created by listeditor so most applications can use
    the global `list_editor` decorator defined here:

        @listeditor.list_editor(models.Widget, 'myapp:templates/widget_form.pt',
                                display_property='name',
                                view_properties=['created_at', 'size'])
        class WidgetsController(listeditor.ListEditorController):
            ....

    Applications which need a separate mapping (several WSGI applications
    running in the same process) can create and use their own registries:

        registry = ListEditorRegistry("myapp")
        @registry.add(models.Widget, 'myapp:templates/widget_form.pt')
        class WidgetsController(listeditor.ListEditorController):
            ...

    Registration happens while the application is configured. Once the
    registry is frozen (see listeditor.config) it is only read.
    """

    entries = None
    app_name = None
    frozen = False

    def __init__(self, app_name):
        """
        Creates a ListEditorRegistry.

        `app_name` is a unique name of the registry (the default global registry
        is called 'default')
        """
        self.app_name = app_name
        self.entries = {}
        self.frozen = False

        if app_name in list_editor_registries:
            raise ValueError("List editor registry %s already exists" % app_name)
        list_editor_registries[app_name] = self

    def add(self, target_class, form_reference, **options):
        """
        A decorator which syntax-sugares registering::

            registry = ListEditorRegistry("myapp")
            @registry.add(models.Widget, 'myapp:templates/widget_form.pt')
            class WidgetsController(listeditor.ListEditorController):
                ...

        """

        def decorator(controller_class):
            self.register(controller_class, target_class, form_reference, **options)
            return controller_class

        return decorator

    def register(self, controller, target_class, form_reference, **options):
        """
        Register a controller as the list editor for `target_class`::

            registry.register(WidgetsController, models.Widget,
                              'myapp:templates/widget_form.pt',
                              display_property='name')

        Options which are not passed get their default values. Registering
        the same controller again replaces the previous entry.
        """
        if self.frozen:
            raise RegistryFrozen("Registry '%s' is frozen, can't register %s" % (self.app_name, controller))

        key = self._key(controller)
        option_set = merge(OptionSet.defaults(target_class, form_reference), options)
        if key in self.entries:
            log.warning("Re-registering %s in list editor registry '%s'", key.__name__, self.app_name)
        self.entries[key] = RegistryEntry(target_class, form_reference, option_set)
        log.debug("Registered %s as list editor for %s in '%s'", key.__name__, target_class.__name__, self.app_name)
        return self.entries[key]

    def lookup(self, controller):
        """
        Returns the RegistryEntry for a controller, which can be passed
        as a class, an instance or the class name (short or dotted)
        """
        key = self.resolve_controller(controller)
        try:
            return self.entries[key]
        except KeyError:
            # subclasses of a registered controller share its entry
            for cls in key.__mro__[1:]:
                if cls in self.entries:
                    return self.entries[cls]
            raise NotRegistered(key.__name__, self.app_name)

    def resolve_controller(self, controller):
        """
        Returns the controller class for a name, class or instance
        """
        if isinstance(controller, str):
            for cls in self.entries:
                if controller in (cls.__name__, "%s.%s" % (cls.__module__, cls.__name__)):
                    return cls
            raise NotRegistered(controller, self.app_name)
        return self._key(controller)

    def get_registered_controllers(self):
        return list(self.entries.keys())

    def freeze(self):
        if not self.frozen:
            log.debug("Freezing list editor registry '%s' with %d entries", self.app_name, len(self.entries))
        self.frozen = True

    def _key(self, controller):
        if isinstance(controller, type):
            return controller
        return controller.__class__


# Create a default registry for the global `list_editor` decorator
default_registry = ListEditorRegistry('default')


def get_registry_by_name(name):
    return list_editor_registries[name]


class list_editor(object):
    """
    A decorator which syntax-sugares registering

    it uses the default registry
    """

    def __init__(self, target_class, form_reference, **options):
        self.target_class = target_class
        self.form_reference = form_reference
        self.options = options

    def __call__(self, cls):
        default_registry.register(cls, self.target_class, self.form_reference, **self.options)
        return cls


def register(controller, target_class, form_reference, **options):
    """
    Register a controller in the default registry
    """
    return default_registry.register(controller, target_class, form_reference, **options)
