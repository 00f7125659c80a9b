# -*- coding: utf-8 -*-

import unittest

from pyramid import testing

from listeditor.actions import ActionHandlers
from listeditor.helpers import ListEditorHelper
from listeditor.persistence import SQLAlchemyPersistence
from listeditor.urls import UrlResolver

from listeditor.tests import DummyController
from listeditor.tests import DummyObject
from listeditor.tests import DummyRouter
from listeditor.tests import Task
from listeditor.tests import make_registry
from listeditor.tests import make_session

FORM = 'listeditor:tests/templates/task_form.pt'


class TasksController(object):
    pass


class TemplateTestCase(unittest.TestCase):

    def setUp(self):
        self.config = testing.setUp()
        self.config.include('pyramid_chameleon')
        self.request = testing.DummyRequest()
        self.registry = make_registry()

    def tearDown(self):
        testing.tearDown()


class ListTemplateTests(TemplateTestCase):

    def _render(self, objects, **options):
        self.registry.register(TasksController, Task, FORM, display_property='title', **options)
        helper = ListEditorHelper(self.request, controller=TasksController(), registry=self.registry,
                                  resolver=UrlResolver(DummyRouter()))
        return helper.render(helper.create_list_editor(objects))

    def _tasks(self):
        return [DummyObject(1, title='A', locked=False), DummyObject(2, title='B', locked=True)]

    def test_entries(self):
        html = self._render(self._tasks(), show_delete=lambda t: not t.locked)
        self.assertTrue('<ul id="task_list">' in html)
        self.assertTrue('id="task_list_1"' in html)
        self.assertTrue('id="task_list_2"' in html)
        self.assertTrue('>A</span>' in html)
        self.assertTrue('href="/edit_task_path/1"' in html)
        self.assertTrue('href="/edit_task_path/2"' in html)
        self.assertTrue('href="/task_path/1"' in html)
        self.assertFalse('href="/task_path/2"' in html)

    def test_add_link(self):
        html = self._render([])
        self.assertTrue('href="/new_task_path"' in html)
        self.assertTrue('Add a new Task</a>' in html)

    def test_no_add_link(self):
        html = self._render(self._tasks(), show_add=lambda: False)
        self.assertFalse('/new_task_path' in html)
        self.assertFalse('Add a new Task' in html)

    def test_view_properties(self):
        html = self._render(self._tasks(), view_properties=['locked'])
        self.assertTrue('<td class="label">locked</td>' in html)


class ActionTemplateTests(TemplateTestCase):

    def setUp(self):
        TemplateTestCase.setUp(self)
        self.session = make_session()
        entry = self.registry.register(TasksController, Task, FORM, display_property='title')
        self.handlers = ActionHandlers(DummyController(entry), SQLAlchemyPersistence(self.session),
                                       UrlResolver(DummyRouter()))

    def tearDown(self):
        self.session.close()
        TemplateTestCase.tearDown(self)

    def _render(self, directive):
        from pyramid.renderers import render
        return render(directive.template, directive.locals, request=self.request)

    def _addTask(self, title):
        task = Task(title=title)
        self.session.add(task)
        self.session.flush()
        return task

    def test_new_dialog(self):
        html = self._render(self.handlers.new())
        self.assertTrue('<h2>Add a new Task</h2>' in html)
        self.assertTrue('action="/tasks_path"' in html)
        self.assertTrue('name="task[title]"' in html)

    def test_edit_dialog(self):
        task = self._addTask('Write docs')
        html = self._render(self.handlers.edit(task))
        self.assertTrue('<h2>Edit Task</h2>' in html)
        self.assertTrue('action="/task_path/%s"' % task.id in html)
        self.assertTrue('value="Write docs"' in html)

    def test_add_entry(self):
        html = self._render(self.handlers.create({'title': 'X'}))
        self.assertTrue('list_editor_new_entry' in html)
        self.assertTrue('>X</span>' in html)
        self.assertTrue('post_create_callback' in html)
        self.assertFalse('could not be saved' in html)

    def test_add_entry_invalid(self):
        html = self._render(self.handlers.create({'title': ''}))
        self.assertFalse('list_editor_new_entry' in html)
        self.assertTrue('The item could not be saved.' in html)

    def test_edit_entry(self):
        task = self._addTask('A')
        html = self._render(self.handlers.update(task, {'title': 'B'}))
        self.assertTrue('list_editor_changed_entry' in html)
        self.assertTrue('>B</span>' in html)
        self.assertTrue('href="/edit_task_path/%s"' % task.id in html)
        self.assertTrue('post_edit_callback' in html)

    def test_delete_entry(self):
        task = self._addTask('A')
        task_id = task.id
        html = self._render(self.handlers.destroy(task))
        self.assertTrue('data-entry="task_list_%s"' % task_id in html)
        self.assertTrue('post_delete_callback' in html)
