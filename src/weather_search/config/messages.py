# User-facing strings. The UI is Turkish.
PROXY_FAILURE_MESSAGE = "Hava durumu verileri alınamadı"
BACKEND_FAILURE_MESSAGE = "Backend request failed"
VIEW_FALLBACK_ERROR = "Bir hata oluştu"

SEARCH_PLACEHOLDER = "Hava durumunu öğrenmek istediğiniz şehri giriniz"
LOADING_TEXT = "Yükleniyor..."
RESULT_TITLE = "{city} Hava Durumu"
RESULT_TEMPERATURE = "Sıcaklık: {temperature}°C"
RESULT_CONDITION = "Durum: {condition}"
