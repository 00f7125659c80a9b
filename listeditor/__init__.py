##########################################
#     This file forms part of LISTEDITOR
#     Copyright: refer to COPYRIGHT.txt
#     License: refer to LICENSE.txt
##########################################

from listeditor.registry import ListEditorRegistry
from listeditor.registry import list_editor, register, get_registry_by_name

from listeditor.models import OptionSet, RenderDirective, Endpoint, merge
from listeditor.models import IListEditorController, IPersistence, IRouter

from listeditor.exceptions import ListEditorError, NotRegistered, NotFound, UnresolvedRoute

from listeditor.urls import UrlResolver, PyramidRouter
from listeditor.actions import ActionHandlers
from listeditor.helpers import ListEditorHelper
from listeditor.persistence import SQLAlchemyPersistence
from listeditor.views import ListEditorController

from listeditor.config import includeme
