# -*- coding: utf-8 -*-

##########################################
#     This file forms part of LISTEDITOR
#     Copyright: refer to COPYRIGHT.txt
#     License: refer to LICENSE.txt
##########################################


class ListEditorError(Exception):
    """ """


class NotRegistered(ListEditorError, LookupError):
    """
    Raised when a controller was never registered as a list editor
    """

    def __init__(self, controller, registry_name=None):
        self.controller = controller
        self.registry_name = registry_name
        msg = "Controller %s is not registered as a list editor" % (controller,)
        if registry_name is not None:
            msg += " in registry '%s'" % registry_name
        ListEditorError.__init__(self, msg)


class NotFound(ListEditorError, LookupError):
    """
    Raised when the object an action operates on can't be found
    """

    def __init__(self, target_class, id):
        self.target_class = target_class
        self.id = id
        ListEditorError.__init__(self, "%s with id %r not found" % (getattr(target_class, '__name__', target_class), id))


class UnresolvedRoute(ListEditorError):
    """
    Raised when a route name for a CRUD operation can't be turned into a URL
    """

    def __init__(self, operation, route_name, reason=None):
        self.operation = operation
        self.route_name = route_name
        self.reason = reason
        msg = "Can't resolve route '%s' for operation '%s'" % (route_name, operation)
        if reason:
            msg += ": %s" % reason
        ListEditorError.__init__(self, msg)


class RegistryFrozen(ListEditorError):
    """
    Raised when something is registered after the application has started
    """
