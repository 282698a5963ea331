from __future__ import annotations

from .actions import ActionsModule as ActionsModule
from .annotations import AnnotationsModule as AnnotationsModule
from .api import ApiModule as ApiModule
from .base import BaseModule as BaseModule
from .base import RequestSink as RequestSink
from .custom_alerts import CustomAlertsModule as CustomAlertsModule
from .custom_dimensions import CustomDimensionsModule as CustomDimensionsModule
from .devices_detection import DevicesDetectionModule as DevicesDetectionModule
from .events import EventsModule as EventsModule
from .goals import GoalsModule as GoalsModule
from .live import LiveModule as LiveModule
from .referrers import ReferrersModule as ReferrersModule
from .scheduled_reports import ScheduledReportsModule as ScheduledReportsModule
from .segment_editor import SegmentEditorModule as SegmentEditorModule
from .sites_manager import SitesManagerModule as SitesManagerModule
from .tag_manager import TagManagerModule as TagManagerModule
from .user_country import UserCountryModule as UserCountryModule
from .users_manager import UsersManagerModule as UsersManagerModule
from .visits_summary import VisitsSummaryModule as VisitsSummaryModule


class DomainModules:
    """
    Attach one instance of every domain module to a backend.

    Mixed into ``ReportingClient`` (modules bound to the transport) and
    ``BatchRequest`` (modules bound to the batch queue) so both expose the
    same attributes.
    """

    api: ApiModule
    actions: ActionsModule
    annotations: AnnotationsModule
    custom_alerts: CustomAlertsModule
    custom_dimensions: CustomDimensionsModule
    devices_detection: DevicesDetectionModule
    events: EventsModule
    goals: GoalsModule
    live: LiveModule
    referrers: ReferrersModule
    scheduled_reports: ScheduledReportsModule
    segment_editor: SegmentEditorModule
    sites_manager: SitesManagerModule
    tag_manager: TagManagerModule
    user_country: UserCountryModule
    users_manager: UsersManagerModule
    visits_summary: VisitsSummaryModule

    def _init_modules(self, backend: RequestSink) -> None:
        self.api = ApiModule(client=backend)
        self.actions = ActionsModule(client=backend)
        self.annotations = AnnotationsModule(client=backend)
        self.custom_alerts = CustomAlertsModule(client=backend)
        self.custom_dimensions = CustomDimensionsModule(client=backend)
        self.devices_detection = DevicesDetectionModule(client=backend)
        self.events = EventsModule(client=backend)
        self.goals = GoalsModule(client=backend)
        self.live = LiveModule(client=backend)
        self.referrers = ReferrersModule(client=backend)
        self.scheduled_reports = ScheduledReportsModule(client=backend)
        self.segment_editor = SegmentEditorModule(client=backend)
        self.sites_manager = SitesManagerModule(client=backend)
        self.tag_manager = TagManagerModule(client=backend)
        self.user_country = UserCountryModule(client=backend)
        self.users_manager = UsersManagerModule(client=backend)
        self.visits_summary = VisitsSummaryModule(client=backend)


__all__ = [
    "DomainModules",
    "RequestSink",
    "BaseModule",
    "ApiModule",
    "ActionsModule",
    "AnnotationsModule",
    "CustomAlertsModule",
    "CustomDimensionsModule",
    "DevicesDetectionModule",
    "EventsModule",
    "GoalsModule",
    "LiveModule",
    "ReferrersModule",
    "ScheduledReportsModule",
    "SegmentEditorModule",
    "SitesManagerModule",
    "TagManagerModule",
    "UserCountryModule",
    "UsersManagerModule",
    "VisitsSummaryModule",
]
