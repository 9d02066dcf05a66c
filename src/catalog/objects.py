"""Built-in Salesforce object definitions.

Only objects listed here can appear in a FROM clause. Field lists cover the standard fields of each
object plus the custom fields known for the default org; other custom fields are accepted by suffix
(see `SchemaCatalog.is_valid_field`).
"""

from __future__ import annotations

from typing import Any

SOFT_DELETE_FILTER = "IsDeleted = false"

_ACTIVITY_FIELDS: tuple[str, ...] = (
    "Id", "WhoId", "WhatId", "WhoCount", "WhatCount", "Subject", "ActivityDate", "Description",
    "Type", "IsDeleted", "IsArchived", "RecurrenceActivityId", "IsRecurrence",
    "RecurrenceStartDateOnly", "RecurrenceEndDateOnly", "RecurrenceTimeZoneSidKey",
    "RecurrenceType", "RecurrenceInterval", "RecurrenceDayOfWeekMask", "RecurrenceDayOfMonth",
    "RecurrenceInstance", "RecurrenceMonthOfYear", "RecurrenceRegeneratedType", "CreatedDate",
    "CreatedById", "LastModifiedDate", "LastModifiedById", "SystemModstamp",
)

BUILTIN_OBJECTS: dict[str, dict[str, Any]] = {
    "Account": {
        "label": "Account",
        "valid_fields": (
            "Id", "Name", "AccountNumber", "Type", "Industry", "Rating", "Phone", "Fax",
            "Website", "PhotoUrl", "BillingStreet", "BillingCity", "BillingState",
            "BillingPostalCode", "BillingCountry", "ShippingStreet", "ShippingCity",
            "ShippingState", "ShippingPostalCode", "ShippingCountry", "Description",
            "NumberOfEmployees", "AnnualRevenue", "OwnerId", "CreatedDate", "CreatedById",
            "LastModifiedDate", "LastModifiedById", "SystemModstamp", "LastActivityDate",
            "LastViewedDate", "LastReferencedDate", "IsDeleted", "MasterRecordId", "ParentId",
            "Active__c", "AUM__c", "Client_Since__c", "Priority__c",
        ),
        "relationships": ("Parent", "Contacts", "Opportunities", "Cases", "Tasks", "Events"),
        "default_fields": ("Id", "Name", "Industry", "Type", "CreatedDate"),
        "default_sort": ("Name",),
    },
    "Contact": {
        "label": "Contact",
        "valid_fields": (
            "Id", "IsDeleted", "MasterRecordId", "AccountId", "LastName", "FirstName",
            "Salutation", "Name", "OtherStreet", "OtherCity", "OtherState", "OtherPostalCode",
            "OtherCountry", "MailingStreet", "MailingCity", "MailingState", "MailingPostalCode",
            "MailingCountry", "Phone", "Fax", "MobilePhone", "HomePhone", "OtherPhone",
            "AssistantPhone", "ReportsToId", "Email", "Title", "Department", "AssistantName",
            "LeadSource", "Birthdate", "Description", "CreatedDate", "CreatedById",
            "LastModifiedDate", "LastModifiedById", "SystemModstamp", "LastActivityDate",
            "LastCURequestDate", "LastCUUpdateDate", "LastViewedDate", "LastReferencedDate",
            "EmailBouncedReason", "EmailBouncedDate", "IsEmailBounced", "PhotoUrl", "Jigsaw",
            "JigsawContactId", "CleanStatus", "IndividualId", "Level__c", "Languages__c",
            "Birthday_Month__c", "VIP_Status__c",
        ),
        "relationships": ("Account", "ReportsTo", "Opportunities", "Cases", "Tasks", "Events"),
        "default_fields": ("Id", "Name", "Email", "Phone", "Title", "CreatedDate"),
        "default_sort": ("Name",),
    },
    "Lead": {
        "label": "Lead",
        "valid_fields": (
            "Id", "IsDeleted", "MasterRecordId", "LastName", "FirstName", "Salutation", "Name",
            "Title", "Company", "Street", "City", "State", "PostalCode", "Country", "Phone",
            "MobilePhone", "Fax", "Email", "Website", "PhotoUrl", "Description", "LeadSource",
            "Status", "Industry", "Rating", "AnnualRevenue", "NumberOfEmployees", "OwnerId",
            "IsConverted", "ConvertedDate", "ConvertedAccountId", "ConvertedContactId",
            "ConvertedOpportunityId", "IsUnreadByOwner", "CreatedDate", "CreatedById",
            "LastModifiedDate", "LastModifiedById", "SystemModstamp", "LastActivityDate",
            "LastViewedDate", "LastReferencedDate", "Jigsaw", "JigsawContactId", "CleanStatus",
            "IndividualId", "CompanyDunsNumber", "DandbCompanyId", "EmailBouncedReason",
            "EmailBouncedDate", "IsEmailBounced", "SICCode__c", "ProductInterest__c",
            "Primary__c", "CurrentGenerators__c", "NumberofLocations__c",
        ),
        "relationships": (
            "Owner", "ConvertedAccount", "ConvertedContact", "ConvertedOpportunity",
        ),
        "default_fields": ("Id", "Name", "Company", "Email", "Status", "CreatedDate"),
        "default_sort": ("Name",),
    },
    "Opportunity": {
        "label": "Opportunity",
        "valid_fields": (
            "Id", "IsDeleted", "AccountId", "RecordTypeId", "Name", "Amount", "CloseDate",
            "StageName", "Type", "Probability", "ExpectedRevenue", "TotalOpportunityQuantity",
            "NextStep", "LeadSource", "IsClosed", "IsWon", "ForecastCategory",
            "ForecastCategoryName", "CampaignId", "HasOpportunityLineItem", "Pricebook2Id",
            "OwnerId", "CreatedDate", "CreatedById", "LastModifiedDate", "LastModifiedById",
            "SystemModstamp", "LastActivityDate", "LastStageChangeDate", "FiscalYear",
            "FiscalQuarter", "Fiscal", "ContactId", "LastViewedDate", "LastReferencedDate",
            "Description", "HasOpenActivity", "HasOverdueTask", "DeliveryInstallationStatus__c",
            "TrackingNumber__c", "OrderNumber__c", "CurrentGenerators__c", "MainCompetitors__c",
        ),
        "relationships": (
            "Account", "Contact", "Owner", "Campaign", "Pricebook2", "OpportunityLineItems",
        ),
        "default_fields": ("Id", "Name", "Amount", "StageName", "CloseDate", "CreatedDate"),
        "default_sort": ("CloseDate DESC",),
    },
    "Case": {
        "label": "Case",
        "valid_fields": (
            "Id", "IsDeleted", "CaseNumber", "ContactId", "AccountId", "AssetId", "ParentId",
            "SuppliedName", "SuppliedEmail", "SuppliedPhone", "SuppliedCompany", "Type",
            "Status", "Reason", "Origin", "Subject", "Priority", "Description", "IsClosed",
            "IsEscalated", "OwnerId", "CreatedDate", "CreatedById", "LastModifiedDate",
            "LastModifiedById", "SystemModstamp", "LastViewedDate", "LastReferencedDate",
            "ClosedDate", "IsClosedOnCreate", "EscalationStartTime", "BusinessHoursId",
            "IsStopped", "StopStartDate", "ContactEmail", "ContactPhone", "ContactMobile",
            "ContactFax", "Comments", "LastCaseUpdate", "CreatedByRole", "LastModifiedByRole",
            "IsVisibleInSelfService", "Days_Since_Last_Update__c", "Escalation_Level__c",
            "SLA_Breach__c", "Customer_Satisfaction__c",
        ),
        "relationships": ("Account", "Contact", "Asset", "Parent", "Owner", "BusinessHours"),
        "default_fields": ("Id", "CaseNumber", "Subject", "Status", "Priority", "CreatedDate"),
        "default_sort": ("CreatedDate DESC",),
    },
    "Task": {
        "label": "Task",
        "valid_fields": _ACTIVITY_FIELDS + (
            "Status", "Priority", "AccountId", "CallDurationInSeconds", "CallType",
            "CallDisposition", "CallObject", "ReminderDateTime", "IsReminderSet", "TaskSubtype",
            "CompletedDateTime",
        ),
        "relationships": ("Who", "What", "Account", "Owner"),
        "default_fields": ("Id", "Subject", "Status", "Priority", "CreatedDate"),
        "default_sort": ("CreatedDate DESC",),
    },
    "Event": {
        "label": "Event",
        "valid_fields": _ACTIVITY_FIELDS + (
            "Location", "IsAllDayEvent", "ActivityDateTime", "DurationInMinutes",
            "StartDateTime", "EndDateTime", "IsPrivate", "ShowAs", "IsGroupEvent",
            "GroupEventType",
        ),
        "relationships": ("Who", "What", "Owner"),
        "default_fields": ("Id", "Subject", "StartDateTime", "EndDateTime", "CreatedDate"),
        "default_sort": ("StartDateTime",),
    },
}
