# -*- coding: utf-8 -*-

##########################################
#     This file forms part of LISTEDITOR
#     Copyright: refer to COPYRIGHT.txt
#     License: refer to LICENSE.txt
##########################################

from zope.interface import implementer

from listeditor.models import IPersistence


@implementer(IPersistence)
class SQLAlchemyPersistence(object):
    """
    The default persistence collaborator, working with an SQLAlchemy session::

        config.set_list_editor_persistence(SQLAlchemyPersistence(DBSession))

    A model can define an `is_valid()` method. Objects failing it are not
    saved by create and update, and the templates are told the action
    was not successful
    """

    def __init__(self, session):
        self.session = session

    def build(self, klass):
        return klass()

    def find(self, klass, id):
        # IDs are expected to be ints; anything else can't match
        try:
            id = int(id)
        except (TypeError, ValueError):
            return None
        return self.session.get(klass, id)

    def create(self, klass, attrs):
        obj = self.build(klass)
        self.deserialize(obj, attrs)
        # invalid objects are returned to the templates but never saved
        if not self.is_valid(obj):
            return obj
        self.session.add(obj)
        self.session.flush()
        return obj

    def update(self, target, attrs):
        self.deserialize(target, attrs)
        if not self.is_valid(target):
            # keep the submitted values for the templates, but detach
            # the object so they never reach the database
            if target in self.session:
                self.session.expunge(target)
            return target
        # flush so the changes are applied before the templates
        # look at the object
        self.session.flush()
        return target

    def destroy(self, target):
        self.session.delete(target)
        self.session.flush()

    def is_valid(self, target):
        validate = getattr(target, 'is_valid', None)
        if validate is None:
            return True
        return bool(validate())

    def deserialize(self, obj, attrs):
        """
        Applies a dictionary of data to the model. Keys with a None value
        are skipped; False, 0 and empty strings are applied.

        There's no schema checks here
        """
        for (k, v) in (attrs or {}).items():
            if v is not None:
                setattr(obj, k, v)
