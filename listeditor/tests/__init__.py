# -*- coding: utf-8 -*-

import itertools

import sqlalchemy as sa
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import relationship
from sqlalchemy.orm import sessionmaker

from listeditor.exceptions import UnresolvedRoute
from listeditor.registry import ListEditorRegistry
from listeditor.urls import path_segment


Base = declarative_base()

# Our test models

class Post(Base):
    __tablename__ = "posts"
    id = sa.Column(sa.Integer, primary_key=True)
    title = sa.Column(sa.String)


class Comment(Base):
    __tablename__ = "comments"
    id = sa.Column(sa.Integer, primary_key=True)
    body = sa.Column(sa.String)
    post_id = sa.Column(sa.Integer, sa.ForeignKey("posts.id"))
    post = relationship(Post, backref="comments")


class Task(Base):
    __tablename__ = "tasks"
    id = sa.Column(sa.Integer, primary_key=True)
    title = sa.Column(sa.String)
    locked = sa.Column(sa.Boolean, default=False)

    def is_valid(self):
        return bool(self.title)

    def __str__(self):
        return self.title or ''


def make_session():
    engine = sa.create_engine('sqlite://')
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False)()


_registry_counter = itertools.count()


def make_registry():
    return ListEditorRegistry('test-%d' % next(_registry_counter))


class DummyRouter(object):
    """
    Records the route names it's asked for and builds fake paths
    """

    def __init__(self, routes=None):
        self.routes = routes
        self.calls = []

    def resolve_path(self, route_name, *params):
        self.calls.append((route_name, params))
        if self.routes is not None and route_name not in self.routes:
            raise UnresolvedRoute(None, route_name, "no such route")
        return '/%s%s' % (route_name, ''.join('/%s' % path_segment(p) for p in params))


class DummyObject(object):

    def __init__(self, id=None, **kw):
        self.id = id
        self.__dict__.update(kw)


class DummyController(object):
    """
    A bare IListEditorController over a registry entry
    """

    def __init__(self, entry, resource_parents=()):
        self.entry = entry
        self.resource_parents = list(resource_parents)

    def klass(self):
        return self.entry.target_class

    def option_set(self):
        return self.entry.options

    def form_reference(self):
        return self.entry.form_reference
