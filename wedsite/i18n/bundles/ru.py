"""Russian bundle. Keys missing here fall back to the default locale."""

BUNDLE = {
    "navigation": {
        "home": "Главная",
        "features": "Возможности",
        "templates": "Шаблоны",
        "pricing": "Цены",
        "contact": "Контакты",
    },
    "hero": {
        "title": "Создайте идеальный свадебный сайт",
        "subtitle": "Красивые свадебные приглашения, которые расскажут вашу историю любви",
        "cta": "Начать сегодня",
        "viewTemplates": "Все шаблоны",
    },
    "features": {
        "title": "Всё необходимое для вашего свадебного сайта",
        "subtitle": "Профессиональные возможности для вашего особенного дня",
    },
    "pricing": {
        "title": "Выберите свой свадебный сайт",
        "subtitle": "От камерной церемонии до большого торжества",
        "viewTemplate": "Посмотреть шаблон",
        "comparisonTitle": "Подробное сравнение возможностей",
    },
    "contact": {
        "title": "Готовы создать свадебный сайт?",
        "subtitle": "Начните сегодня и создайте красивый сайт для вашего дня",
        "cta": "Начать",
    },
    "common": {
        "currency": "AMD",
        "learnMore": "Подробнее",
        "getStarted": "Начать",
        "viewMore": "Смотреть ещё",
        "included": "Включено",
        "notIncluded": "Не включено",
    },
    "rsvp": {
        "messages": {
            "success": "Спасибо! Ваш ответ получен.",
            "alreadySubmitted": "С этого адреса уже был отправлен ответ",
            "invalid": "Некоторые поля заполнены неверно",
            "maintenance": "Приём ответов временно закрыт",
        },
    },
    "errors": {
        "templateNotFound": "Шаблон не найден",
        "serverError": "Ошибка сервера",
    },
    "template": {
        "countdown": {
            "subtitle": "До свадьбы осталось",
            "labels": {"days": "дней", "hours": "часов", "minutes": "минут", "seconds": "секунд"},
        },
        "calendar": {
            "dayLabels": ["Вс", "Пн", "Вт", "Ср", "Чт", "Пт", "Сб"],
        },
        "rsvp": {
            "form": {
                "firstName": "Имя",
                "firstNamePlaceholder": "Ваше имя",
                "lastName": "Фамилия",
                "lastNamePlaceholder": "Ваша фамилия",
                "email": "Эл. почта",
                "emailPlaceholder": "your@email.com",
                "guestCount": "Количество гостей",
                "guestCountPlaceholder": "Выберите количество",
                "guestNames": "Имена гостей",
                "guestNamesPlaceholder": "Укажите имена всех гостей",
                "attendance": "Вы придёте?",
                "attendingYes": "С радостью приду!",
                "attendingNo": "К сожалению, не смогу",
                "submitButton": "Отправить ответ",
                "submittingButton": "Отправка...",
            },
            "messages": {
                "success": "Спасибо! Ваш ответ получен.",
                "error": "Не удалось отправить ответ. Попробуйте ещё раз.",
                "loading": "Отправка ответа...",
                "required": "Это поле обязательно.",
            },
        },
        "navigation": {
            "home": "Главная",
            "countdown": "Обратный отсчёт",
            "calendar": "Календарь",
            "locations": "Места",
            "timeline": "Программа",
            "rsvp": "Ответ",
            "photos": "Фото",
        },
        "maintenance": {
            "passwordPrompt": "Введите пароль",
            "wrongPassword": "Неверный пароль",
            "enterPassword": "Войти",
        },
        "ui": {
            "buttons": {
                "loading": "Загрузка...",
                "close": "Закрыть",
                "cancel": "Отмена",
                "save": "Сохранить",
                "back": "Назад",
                "next": "Далее",
            },
            "messages": {
                "loading": "Загрузка...",
                "error": "Произошла ошибка",
                "success": "Успешно сохранено",
                "notFound": "Не найдено",
                "offline": "Нет подключения к интернету",
            },
        },
        "mapModal": {
            "title": "Место",
            "closeButton": "Закрыть",
            "loadingMessage": "Загрузка карты...",
            "errorMessage": "Не удалось загрузить карту",
        },
    },
}
