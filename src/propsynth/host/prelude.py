"""Library types every compilation can reference, written as declarations."""

PRELUDE_PATH = "<prelude>"

PRELUDE = """
namespace system {
    public class Attribute { }
    public class EventArgs { }
}

namespace events {
    public class PropertyChangedEventArgs : system.EventArgs { }
    public class PropertyChangingEventArgs : system.EventArgs { }
}

namespace mvvm {
    public abstract class ObservableObject { }
    public abstract class ObservableRecipient : ObservableObject { }
    public abstract class ObservableValidator : ObservableObject { }

    public sealed class ObservablePropertyAttribute : system.Attribute { }
    public sealed class NotifyPropertyChangedForAttribute : system.Attribute { }
    public sealed class NotifyCanExecuteChangedForAttribute : system.Attribute { }
    public sealed class NotifyPropertyChangedRecipientsAttribute : system.Attribute { }
    public sealed class NotifyDataErrorInfoAttribute : system.Attribute { }
    public sealed class ObservableObjectAttribute : system.Attribute { }
    public sealed class INotifyPropertyChangedAttribute : system.Attribute { }
}

namespace annotations {
    public abstract class ValidationAttribute : system.Attribute { }
    public class RequiredAttribute : ValidationAttribute { }
    public class RangeAttribute : ValidationAttribute { }
    public class MinLengthAttribute : ValidationAttribute { }
    public class MaxLengthAttribute : ValidationAttribute { }
    public class StringLengthAttribute : ValidationAttribute { }
    public class EmailAddressAttribute : ValidationAttribute { }
    public class RegularExpressionAttribute : ValidationAttribute { }

    public sealed class DisplayAttribute : system.Attribute { }
    public sealed class EditableAttribute : system.Attribute { }
    public sealed class KeyAttribute : system.Attribute { }
    public class UIHintAttribute : system.Attribute { }
    public class ScaffoldColumnAttribute : system.Attribute { }
}
"""
