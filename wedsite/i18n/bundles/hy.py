"""Armenian bundle. Keys missing here fall back to the default locale."""

BUNDLE = {
    "navigation": {
        "home": "Գլխավոր",
        "features": "Հնարավորություններ",
        "templates": "Ձևանմուշներ",
        "pricing": "Գներ",
        "contact": "Կապ",
    },
    "hero": {
        "title": "Ստեղծեք Ձեր կատարյալ հարսանեկան կայքը",
        "subtitle": "Գեղեցիկ և հարմարեցվող հարսանեկան հրավիրատոմսեր, որոնք պատմում են Ձեր սիրո պատմությունը",
        "cta": "Սկսել այսօր",
        "viewTemplates": "Դիտել բոլոր ձևանմուշները",
    },
    "features": {
        "title": "Ամեն ինչ Ձեր հարսանեկան կայքի համար",
        "subtitle": "Մասնագիտական հնարավորություններ Ձեր հատուկ օրվա համար",
    },
    "pricing": {
        "title": "Ընտրեք Ձեր կատարյալ հարսանեկան կայքը",
        "viewTemplate": "Դիտել ձևանմուշը",
    },
    "contact": {
        "title": "Պատրա՞ստ եք ստեղծել Ձեր հարսանեկան կայքը",
        "cta": "Սկսել հիմա",
    },
    "common": {
        "currency": "֏",
        "learnMore": "Իմանալ ավելին",
        "getStarted": "Սկսել",
        "viewMore": "Տեսնել ավելին",
        "included": "Ներառված է",
        "notIncluded": "Ներառված չէ",
    },
    "rsvp": {
        "messages": {
            "success": "Շնորհակալություն! Ձեր հաստատումը ստացվել է:",
            "alreadySubmitted": "Այս էլ․ հասցեով արդեն ուղարկվել է հաստատում",
            "invalid": "Տվյալները ճիշտ չեն լրացված",
            "maintenance": "Հաստատումները ժամանակավորապես փակ են",
        },
    },
    "errors": {
        "templateNotFound": "Ձևանմուշը չի գտնվել",
        "serverError": "Սերվերի սխալ",
    },
    "template": {
        "countdown": {
            "subtitle": "Հարսանիքին մնացել է",
            "labels": {"days": "օր", "hours": "ժամ", "minutes": "րոպե", "seconds": "վայրկյան"},
        },
        "calendar": {
            "dayLabels": ["ԿՐԿ", "ԵՐԿ", "ԵՐՔ", "ՉՈՐ", "ՀՆԳ", "ՈՒՐ", "ՇԲԹ"],
        },
        "rsvp": {
            "form": {
                "firstName": "Անուն",
                "firstNamePlaceholder": "Ձեր անունը",
                "lastName": "Ազգանուն",
                "lastNamePlaceholder": "Ձեր ազգանունը",
                "email": "Էլ․ հասցե",
                "emailPlaceholder": "your@email.com",
                "guestCount": "Հյուրերի քանակ",
                "guestCountPlaceholder": "Ընտրեք հյուրերի քանակը",
                "guestNames": "Հյուրերի անունները և ազգանունները",
                "guestNamesPlaceholder": "Նշեք բոլոր հյուրերի անունները և ազգանունները",
                "attendance": "Մասնակցություն",
                "attendingYes": "Սիրով կմասնակցեմ 🤍",
                "attendingNo": "Ցավոք, չեմ կարող",
                "submitButton": "Ուղարկել հաստատումը",
                "submittingButton": "Ուղարկվում է...",
            },
            "messages": {
                "success": "Շնորհակալություն! Ձեր հաստատումը ստացվել է:",
                "error": "Սխալ տեղի ունեցավ։ Խնդրում ենք կրկին փորձել։",
                "loading": "Ուղարկվում է...",
                "required": "Այս դաշտը պարտադիր է։",
            },
        },
        "navigation": {
            "home": "Գլխավոր",
            "countdown": "Հարսանիքին մնացել է",
            "calendar": "Օրացույց",
            "locations": "Վայրեր",
            "timeline": "Ծրագիր",
            "rsvp": "Հաստատում",
            "photos": "Լուսանկարներ",
        },
        "maintenance": {
            "passwordPrompt": "Ներմուծեք գաղտնի կոդը նախադիտման համար",
            "wrongPassword": "Սխալ գաղտնի կոդ",
            "enterPassword": "Մուտքագրել կոդ",
        },
        "ui": {
            "buttons": {
                "loading": "Բեռնվում է...",
                "close": "Փակել",
                "cancel": "Չեղարկել",
                "save": "Պահպանել",
                "back": "Հետ",
                "next": "Առաջ",
            },
            "messages": {
                "loading": "Բեռնվում է...",
                "error": "Սխալ տեղի ունեցավ",
                "success": "Հաջողությամբ պահպանվեց",
                "notFound": "Չի գտնվել",
            },
        },
        "mapModal": {
            "title": "Վայր",
            "closeButton": "Փակել",
            "loadingMessage": "Քարտեզը բեռնվում է...",
            "errorMessage": "Չհաջողվեց բեռնել քարտեզը",
        },
    },
}
