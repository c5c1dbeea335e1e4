"""Fully-qualified names of the library types the generator recognizes."""

# Primary annotation
OBSERVABLE_PROPERTY = "mvvm.ObservablePropertyAttribute"

# Annotations that only make sense next to the primary one
NOTIFY_PROPERTY_CHANGED_FOR = "mvvm.NotifyPropertyChangedForAttribute"
NOTIFY_CAN_EXECUTE_CHANGED_FOR = "mvvm.NotifyCanExecuteChangedForAttribute"
NOTIFY_PROPERTY_CHANGED_RECIPIENTS = "mvvm.NotifyPropertyChangedRecipientsAttribute"
NOTIFY_DATA_ERROR_INFO = "mvvm.NotifyDataErrorInfoAttribute"

DEPENDENT_ATTRIBUTES = (
    NOTIFY_PROPERTY_CHANGED_FOR,
    NOTIFY_CAN_EXECUTE_CHANGED_FOR,
    NOTIFY_PROPERTY_CHANGED_RECIPIENTS,
    NOTIFY_DATA_ERROR_INFO,
)

# Container eligibility
OBSERVABLE_OBJECT = "mvvm.ObservableObject"
OBSERVABLE_VALIDATOR = "mvvm.ObservableValidator"
OBSERVABLE_OBJECT_ATTRIBUTE = "mvvm.ObservableObjectAttribute"
INOTIFY_PROPERTY_CHANGED_ATTRIBUTE = "mvvm.INotifyPropertyChangedAttribute"

# Data annotations
VALIDATION_ATTRIBUTE = "annotations.ValidationAttribute"
DISPLAY_ATTRIBUTE = "annotations.DisplayAttribute"
EDITABLE_ATTRIBUTE = "annotations.EditableAttribute"
KEY_ATTRIBUTE = "annotations.KeyAttribute"
UI_HINT_ATTRIBUTE = "annotations.UIHintAttribute"
SCAFFOLD_COLUMN_ATTRIBUTE = "annotations.ScaffoldColumnAttribute"

# Forwarded only on an exact match
FORWARDED_EXACT = (DISPLAY_ATTRIBUTE, EDITABLE_ATTRIBUTE, KEY_ATTRIBUTE)
# Forwarded on a match or any derived annotation
FORWARDED_INHERITED = (UI_HINT_ATTRIBUTE, SCAFFOLD_COLUMN_ATTRIBUTE)

# Types the generated change hooks already use
OBJECT = "object"
PROPERTY_CHANGED_EVENT_ARGS = "events.PropertyChangedEventArgs"
PROPERTY_CHANGING_EVENT_ARGS = "events.PropertyChangingEventArgs"
